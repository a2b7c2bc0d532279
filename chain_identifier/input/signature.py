# chain_identifier/input/signature.py
import math
from dataclasses import dataclass
from typing import Optional, Tuple, TYPE_CHECKING

from chain_identifier.core.types import CharSet, EncodingType
from chain_identifier.input.characteristics import InputCharacteristics

if TYPE_CHECKING:
    from chain_identifier.registry.metadata import AddressMetadata

# Prefixes that identify a network better than a bare first character
_KNOWN_HRP_PREFIXES = ("bc1", "tb1", "ltc1")

@dataclass(frozen=True)
class CategorySignature:
    """Coarse description of an address family, comparable against input characteristics"""
    char_set: Optional[CharSet]
    min_len: int
    max_len: float
    has_hrp: bool
    prefixes: Tuple[str, ...]
    hrp_prefixes: Tuple[str, ...]
    encoding_type: Optional[EncodingType]

    @classmethod
    def from_metadata(cls, metadata: 'AddressMetadata') -> 'CategorySignature':
        if metadata.exact_length is not None:
            min_len, max_len = metadata.exact_length, metadata.exact_length
        elif metadata.length_range is not None:
            min_len, max_len = metadata.length_range
        else:
            min_len, max_len = 0, math.inf

        return cls(
            char_set=metadata.char_set,
            min_len=min_len,
            max_len=max_len,
            has_hrp=bool(metadata.hrps),
            prefixes=tuple(metadata.prefixes),
            hrp_prefixes=tuple(metadata.hrps),
            encoding_type=metadata.encoding,
        )

    @classmethod
    def from_characteristics(cls, chars: InputCharacteristics) -> 'CategorySignature':
        if "0x" in chars.prefixes:
            prefixes = ("0x",)
        else:
            known = [p for p in chars.prefixes if p.lower() in _KNOWN_HRP_PREFIXES]
            if known:
                prefixes = (known[0],)
            elif chars.prefixes:
                prefixes = (max(chars.prefixes, key=len),)
            else:
                prefixes = ()

        return cls(
            char_set=chars.char_set,
            min_len=chars.length,
            max_len=chars.length,
            has_hrp=chars.hrp is not None,
            prefixes=prefixes,
            hrp_prefixes=(chars.hrp,) if chars.hrp else (),
            encoding_type=chars.primary_encoding,
        )

    def matches(self, chars: InputCharacteristics) -> bool:
        """True when the input satisfies every constraint this signature declares"""
        if self.char_set is not None and self.char_set not in chars.char_sets:
            return False
        if not self.min_len <= chars.length <= self.max_len:
            return False
        if self.has_hrp and chars.hrp is None:
            return False
        if self.prefixes and not any(p in chars.prefixes for p in self.prefixes):
            return False
        if self.hrp_prefixes:
            if chars.hrp is None or not any(chars.hrp.startswith(h) for h in self.hrp_prefixes):
                return False
        if self.encoding_type is not None and self.encoding_type not in chars.encodings:
            return False
        return True
