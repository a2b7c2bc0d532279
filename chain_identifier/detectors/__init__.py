from chain_identifier.detectors.address import detect_address, normalize_address
from chain_identifier.detectors.public_key import detect_public_key

__all__ = [
    'detect_address',
    'normalize_address',
    'detect_public_key'
]
