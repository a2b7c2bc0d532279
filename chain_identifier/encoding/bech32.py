# chain_identifier/encoding/bech32.py
"""
Bech32 (BIP-173) and Bech32m (BIP-350) codec.

The polymod, HRP expansion and bit regrouping come from the ``bech32``
package; the variant detection on decode and Bech32m checksum creation live
here since the package only knows the original constant.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from bech32 import CHARSET, bech32_polymod, bech32_hrp_expand, convertbits

from chain_identifier.core.exceptions import EncodingError
from chain_identifier.core.types import EncodingType

SEPARATOR = "1"
CHECKSUM_LENGTH = 6
MAX_LENGTH = 90

class Bech32Variant(Enum):
    """Checksum constant distinguishing the two variants"""
    BECH32 = 1
    BECH32M = 0x2BC830A3

    @property
    def encoding(self) -> EncodingType:
        return EncodingType.BECH32 if self is Bech32Variant.BECH32 else EncodingType.BECH32M

@dataclass(frozen=True)
class Bech32Decoded:
    hrp: str
    data: Tuple[int, ...]
    variant: Bech32Variant

def _split(value: str, max_length: int) -> Tuple[str, str]:
    """Shape checks shared by decode and extract_hrp; returns lowercase (hrp, data part)"""
    if not value:
        raise EncodingError("Empty Bech32 string")
    if any(ord(c) < 33 or ord(c) > 126 for c in value):
        raise EncodingError("Bech32 string contains non-printable characters")
    if value.lower() != value and value.upper() != value:
        raise EncodingError("Bech32 string has mixed case")
    if len(value) > max_length:
        raise EncodingError(f"Bech32 string exceeds {max_length} characters")

    value = value.lower()
    pos = value.rfind(SEPARATOR)
    if pos < 1 or pos + CHECKSUM_LENGTH + 1 > len(value):
        raise EncodingError("Bech32 separator missing or misplaced")

    data_part = value[pos + 1:]
    invalid = [c for c in data_part if c not in CHARSET]
    if invalid:
        raise EncodingError(f"Invalid Bech32 character {invalid[0]!r}")
    return value[:pos], data_part

def is_bech32_shaped(value: str, max_length: int = MAX_LENGTH) -> bool:
    return extract_hrp(value, max_length) is not None

def extract_hrp(value: str, max_length: int = MAX_LENGTH) -> Optional[str]:
    """Return the lowercase HRP if the string is Bech32-shaped, without checking the checksum"""
    try:
        hrp, _ = _split(value, max_length)
    except EncodingError:
        return None
    return hrp

def decode(value: str, max_length: int = MAX_LENGTH) -> Bech32Decoded:
    """Decode and verify a Bech32 or Bech32m string, reporting the variant that matched"""
    hrp, data_part = _split(value, max_length)
    data = [CHARSET.find(c) for c in data_part]

    const = bech32_polymod(bech32_hrp_expand(hrp) + data)
    for variant in Bech32Variant:
        if const == variant.value:
            return Bech32Decoded(hrp, tuple(data[:-CHECKSUM_LENGTH]), variant)

    raise EncodingError("Bech32 checksum verification failed")

def create_checksum(hrp: str, data: Sequence[int], variant: Bech32Variant) -> List[int]:
    values = bech32_hrp_expand(hrp) + list(data)
    polymod = bech32_polymod(values + [0] * CHECKSUM_LENGTH) ^ variant.value
    return [(polymod >> 5 * (5 - i)) & 31 for i in range(CHECKSUM_LENGTH)]

def encode(hrp: str, data: Sequence[int], variant: Bech32Variant = Bech32Variant.BECH32) -> str:
    """Encode 5-bit groups under the given HRP"""
    if not hrp:
        raise EncodingError("Bech32 HRP must not be empty")
    if any(d < 0 or d > 31 for d in data):
        raise EncodingError("Bech32 data values must be 5-bit")
    combined = list(data) + create_checksum(hrp, data, variant)
    return hrp + SEPARATOR + ''.join(CHARSET[d] for d in combined)

def convert_bits(data: Sequence[int], from_bits: int, to_bits: int, pad: bool = True) -> List[int]:
    """Regroup bits; with pad=False leftover bits must be zero and fewer than from_bits"""
    converted = convertbits(list(data), from_bits, to_bits, pad)
    if converted is None:
        raise EncodingError(f"Invalid bit groups converting {from_bits}-bit to {to_bits}-bit data")
    return converted

def encode_bytes(hrp: str, payload: bytes, variant: Bech32Variant = Bech32Variant.BECH32) -> str:
    return encode(hrp, convert_bits(payload, 8, 5, pad=True), variant)

def decode_to_bytes(value: str) -> Tuple[str, bytes, Bech32Variant]:
    decoded = decode(value)
    return decoded.hrp, bytes(convert_bits(decoded.data, 5, 8, pad=False)), decoded.variant
