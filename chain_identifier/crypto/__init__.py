from chain_identifier.crypto.hashing import (
    sha256, double_sha256, keccak256, ripemd160, hash160,
    blake2b_256, blake2b_512, sha3_256
)
from chain_identifier.crypto.secp256k1 import decompress_public_key, extract_64_bytes

__all__ = [
    'sha256',
    'double_sha256',
    'keccak256',
    'ripemd160',
    'hash160',
    'blake2b_256',
    'blake2b_512',
    'sha3_256',
    'decompress_public_key',
    'extract_64_bytes'
]
