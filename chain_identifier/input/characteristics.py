# chain_identifier/input/characteristics.py
"""
Cheap structural features of an input string.

Every encoding the string is compatible with is collected; downstream stages
decide which interpretation holds.
"""
from dataclasses import dataclass
from typing import Optional, Tuple, List

from chain_identifier.checksum import base58check
from chain_identifier.core.exceptions import EncodingError
from chain_identifier.core.types import CharSet, EncodingType, EntropyClass
from chain_identifier.encoding import base58, bech32, hex

SS58_MIN_STRING_LENGTH = 35
SS58_MAX_STRING_LENGTH = 48
SS58_DECODED_LENGTHS = (35, 36)

@dataclass(frozen=True)
class InputCharacteristics:
    length: int
    char_set: CharSet
    prefixes: Tuple[str, ...]
    hrp: Optional[str]
    encodings: Tuple[EncodingType, ...]
    normalized: str
    entropy_class: EntropyClass

    @property
    def primary_encoding(self) -> Optional[EncodingType]:
        return self.encodings[0] if self.encodings else None

    @property
    def char_sets(self) -> Tuple[CharSet, ...]:
        """Alphabets of every compatible encoding, primary first"""
        sets = [self.char_set]
        for encoding in self.encodings:
            if encoding.char_set not in sets:
                sets.append(encoding.char_set)
        return tuple(sets)

def _prefixes(value: str) -> Tuple[str, ...]:
    prefixes = []
    for n in (1, 2, 3):
        if len(value) >= n and value[:n] not in prefixes:
            prefixes.append(value[:n])
    if value.startswith("0x") and "0x" not in prefixes:
        prefixes.append("0x")
    return tuple(prefixes)

def _is_ss58_candidate(value: str) -> bool:
    if not SS58_MIN_STRING_LENGTH <= len(value) <= SS58_MAX_STRING_LENGTH:
        return False
    try:
        return len(base58.decode(value)) in SS58_DECODED_LENGTHS
    except EncodingError:
        return False

def _detect_encodings(value: str) -> List[EncodingType]:
    encodings = []

    # Bech32 first: a successful decode also tells the variant
    try:
        encodings.append(bech32.decode(value).variant.encoding)
    except EncodingError:
        pass

    if hex.is_hex(value):
        encodings.append(EncodingType.HEX)

    if base58.is_base58(value):
        claimed = False
        if base58check.validate(value) is not None:
            encodings.append(EncodingType.BASE58CHECK)
            claimed = True
        if _is_ss58_candidate(value):
            encodings.append(EncodingType.SS58)
            claimed = True
        if not claimed:
            encodings.append(EncodingType.BASE58)

    return encodings

def _char_set(encodings: List[EncodingType]) -> CharSet:
    return encodings[0].char_set if encodings else CharSet.ALPHANUMERIC

def _entropy_class(value: str, encodings: List[EncodingType]) -> EntropyClass:
    primary = encodings[0] if encodings else None
    if primary is EncodingType.HEX and value.startswith("0x"):
        return EntropyClass.LOW
    if primary in (EncodingType.BECH32, EncodingType.BECH32M):
        return EntropyClass.LOW
    if primary in (EncodingType.BASE58, EncodingType.BASE58CHECK, EncodingType.SS58):
        return EntropyClass.MEDIUM
    return EntropyClass.HIGH

def extract_characteristics(value: str) -> InputCharacteristics:
    """Derive the structural characteristics of an input string"""
    encodings = _detect_encodings(value)
    return InputCharacteristics(
        length=len(value),
        char_set=_char_set(encodings),
        prefixes=_prefixes(value),
        hrp=bech32.extract_hrp(value),
        encodings=tuple(encodings),
        normalized=value.lower(),
        entropy_class=_entropy_class(value, encodings),
    )
