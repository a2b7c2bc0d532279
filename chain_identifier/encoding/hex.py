# chain_identifier/encoding/hex.py
import string

from chain_identifier.core.exceptions import EncodingError

HEX_PREFIX = "0x"
_HEX_DIGITS = frozenset(string.hexdigits)

def strip_prefix(value: str) -> str:
    if value[:2] in ("0x", "0X"):
        return value[2:]
    return value

def is_hex(value: str) -> bool:
    """True for 0x-prefixed or bare hex strings with an even number of digits"""
    digits = strip_prefix(value)
    return bool(digits) and len(digits) % 2 == 0 and all(c in _HEX_DIGITS for c in digits)

def decode(value: str) -> bytes:
    if not is_hex(value):
        raise EncodingError(f"Not an even-length hex string: {value!r}")
    return bytes.fromhex(strip_prefix(value))

def encode(data: bytes) -> str:
    return HEX_PREFIX + data.hex()
