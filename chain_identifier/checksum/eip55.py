# chain_identifier/checksum/eip55.py
"""
EIP-55 mixed-case checksum for 20-byte hex addresses.

The casing of hex letter i follows nibble i of keccak256 over the lowercase
hex digits (without the 0x prefix): uppercase when the nibble is >= 8.
"""
import string

from chain_identifier.core.exceptions import ChecksumError
from chain_identifier.crypto.hashing import keccak256

ADDRESS_HEX_LENGTH = 40
_HEX_DIGITS = frozenset(string.hexdigits)

def _address_digits(address: str) -> str:
    if not address.startswith("0x"):
        raise ChecksumError(f"EIP-55 address must start with 0x: {address!r}")
    digits = address[2:]
    if len(digits) != ADDRESS_HEX_LENGTH or not all(c in _HEX_DIGITS for c in digits):
        raise ChecksumError(f"EIP-55 address must carry {ADDRESS_HEX_LENGTH} hex digits: {address!r}")
    return digits

def _nibble(digest: bytes, i: int) -> int:
    byte = digest[i // 2]
    return byte >> 4 if i % 2 == 0 else byte & 0x0F

def to_checksum_address(address: str) -> str:
    """Return the checksummed form; idempotent on already checksummed input"""
    digits = _address_digits(address).lower()
    digest = keccak256(digits.encode('ascii'))
    return "0x" + ''.join(
        c.upper() if c.isalpha() and _nibble(digest, i) >= 8 else c
        for i, c in enumerate(digits)
    )

def is_checksummed(address: str) -> bool:
    """Uniformly cased addresses carry no checksum information"""
    digits = address[2:] if address.startswith("0x") else address
    return digits != digits.lower() and digits != digits.upper()

def validate(address: str) -> bool:
    """True only for mixed-case addresses whose casing matches the checksum"""
    try:
        return is_checksummed(address) and to_checksum_address(address) == address
    except ChecksumError:
        return False

def normalize(address: str) -> str:
    return to_checksum_address(address)
