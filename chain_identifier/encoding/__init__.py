from chain_identifier.encoding import hex, base58, bech32, ss58
from chain_identifier.encoding.bech32 import Bech32Variant, Bech32Decoded
from chain_identifier.encoding.ss58 import SS58Address
from chain_identifier.encoding.raw import decode_raw

__all__ = [
    'hex',
    'base58',
    'bech32',
    'ss58',
    'Bech32Variant',
    'Bech32Decoded',
    'SS58Address',
    'decode_raw'
]
