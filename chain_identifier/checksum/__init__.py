from chain_identifier.checksum import eip55, base58check, ss58

__all__ = [
    'eip55',
    'base58check',
    'ss58'
]
