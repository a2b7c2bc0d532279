# chain_identifier/encoding/base58.py
import base58

from chain_identifier.core.exceptions import EncodingError

ALPHABET = base58.BITCOIN_ALPHABET.decode('ascii')
_ALPHABET_SET = frozenset(ALPHABET)

def is_base58(value: str) -> bool:
    return bool(value) and all(c in _ALPHABET_SET for c in value)

def decode(value: str) -> bytes:
    """Decode a Bitcoin-alphabet Base58 string"""
    if not value:
        raise EncodingError("Empty Base58 string")
    invalid = [c for c in value if c not in _ALPHABET_SET]
    if invalid:
        raise EncodingError(f"Invalid Base58 character {invalid[0]!r}")
    try:
        return base58.b58decode(value)
    except ValueError as e:
        raise EncodingError(f"Base58 decoding failed: {e}") from e

def encode(data: bytes) -> str:
    return base58.b58encode(data).decode('ascii')
