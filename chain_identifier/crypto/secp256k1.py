# chain_identifier/crypto/secp256k1.py
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from chain_identifier.core.exceptions import DerivationError

CURVE = ec.SECP256K1()

COMPRESSED_KEY_SIZE = 33
UNCOMPRESSED_KEY_SIZE = 65
RAW_KEY_SIZE = 64

def is_compressed_key(key: bytes) -> bool:
    return len(key) == COMPRESSED_KEY_SIZE and key[0] in (0x02, 0x03)

def is_uncompressed_key(key: bytes) -> bool:
    return len(key) == UNCOMPRESSED_KEY_SIZE and key[0] == 0x04

def decompress_public_key(key: bytes) -> bytes:
    """Expand a 33-byte SEC1 compressed point to its 65-byte uncompressed form"""
    if not is_compressed_key(key):
        raise DerivationError(
            f"Expected 33-byte compressed secp256k1 key with 0x02/0x03 prefix, got {len(key)} bytes"
        )
    try:
        point = ec.EllipticCurvePublicKey.from_encoded_point(CURVE, key)
    except ValueError as e:
        raise DerivationError(f"Invalid secp256k1 point: {e}") from e

    return point.public_bytes(Encoding.X962, PublicFormat.UncompressedPoint)

def extract_64_bytes(key: bytes) -> bytes:
    """Return the bare X||Y coordinates for a 33, 64 or 65 byte secp256k1 key"""
    if len(key) == COMPRESSED_KEY_SIZE:
        return decompress_public_key(key)[1:]
    if len(key) == UNCOMPRESSED_KEY_SIZE:
        if key[0] != 0x04:
            raise DerivationError("Uncompressed secp256k1 key must start with 0x04")
        return key[1:]
    if len(key) == RAW_KEY_SIZE:
        return key
    raise DerivationError(
        f"Unsupported secp256k1 key length: {len(key)} bytes (expected 33, 64 or 65)"
    )
