# chain_identifier/input/classifier.py
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from chain_identifier.core.exceptions import EncodingError, InvalidInputError
from chain_identifier.core.types import EncodingType, InputType, PublicKeyType
from chain_identifier.crypto.secp256k1 import is_compressed_key, is_uncompressed_key
from chain_identifier.encoding.raw import decode_raw
from chain_identifier.input.characteristics import InputCharacteristics

logger = logging.getLogger(__name__)

class KeyForm(Enum):
    """How the key bytes were laid out"""
    RAW = "raw"
    COMPRESSED = "compressed"
    UNCOMPRESSED = "uncompressed"

    @property
    def key_length(self) -> int:
        return _KEY_FORM_LENGTHS[self]

_KEY_FORM_LENGTHS = {
    KeyForm.RAW: 32,
    KeyForm.COMPRESSED: 33,
    KeyForm.UNCOMPRESSED: 65,
}

@dataclass(frozen=True)
class InputPossibility:
    input_type: InputType
    key_type: Optional[PublicKeyType] = None
    key_form: Optional[KeyForm] = None
    # encoding the key bytes were decoded under
    encoding: Optional[EncodingType] = None

    @classmethod
    def address(cls) -> 'InputPossibility':
        return cls(InputType.ADDRESS)

    @classmethod
    def public_key(cls, key_type: PublicKeyType, key_form: KeyForm,
                   encoding: EncodingType) -> 'InputPossibility':
        return cls(InputType.PUBLIC_KEY, key_type, key_form, encoding)

    @property
    def is_address(self) -> bool:
        return self.input_type is InputType.ADDRESS

# Length envelopes an address string must fall in per encoding
ADDRESS_LENGTH_WINDOWS = {
    EncodingType.BASE58CHECK: (26, 48),
    EncodingType.BASE58: (32, 44),
    EncodingType.SS58: (35, 48),
    EncodingType.BECH32: (14, 90),
    EncodingType.BECH32M: (14, 90),
}

def _fits_address_envelope(encoding: EncodingType, chars: InputCharacteristics) -> bool:
    if encoding is EncodingType.HEX:
        return chars.length == 42 and "0x" in chars.prefixes
    if encoding in (EncodingType.BECH32, EncodingType.BECH32M) and chars.hrp is None:
        return False
    low, high = ADDRESS_LENGTH_WINDOWS[encoding]
    return low <= chars.length <= high

def could_be_address(chars: InputCharacteristics) -> bool:
    if any(_fits_address_envelope(e, chars) for e in chars.encodings):
        return True
    return not chars.encodings and chars.hrp is not None

def _key_possibilities(key: bytes, encoding: EncodingType) -> List[InputPossibility]:
    if len(key) == 32:
        return [
            InputPossibility.public_key(PublicKeyType.ED25519, KeyForm.RAW, encoding),
            InputPossibility.public_key(PublicKeyType.SR25519, KeyForm.RAW, encoding),
        ]
    if is_compressed_key(key):
        return [InputPossibility.public_key(PublicKeyType.SECP256K1, KeyForm.COMPRESSED, encoding)]
    if is_uncompressed_key(key):
        return [InputPossibility.public_key(PublicKeyType.SECP256K1, KeyForm.UNCOMPRESSED, encoding)]
    return []

def detect_public_key_types(value: str, chars: InputCharacteristics) -> List[InputPossibility]:
    """Key interpretations of the bytes under each compatible encoding"""
    possibilities = []
    decoded = set()
    for encoding in chars.encodings:
        # encodings sharing an alphabet decode to the same bytes
        if encoding.char_set in decoded:
            continue
        try:
            key = decode_raw(value, encoding)
        except EncodingError as e:
            logger.debug("No %s key bytes in %r: %s", encoding.value, value, e)
            continue
        decoded.add(encoding.char_set)
        possibilities.extend(_key_possibilities(key, encoding))
    return possibilities

def classify_input(value: str, chars: InputCharacteristics) -> List[InputPossibility]:
    """
    Decide whether the input could be an address, a public key, or both.

    Raises InvalidInputError when neither interpretation is possible.
    """
    possibilities = []
    if could_be_address(chars):
        possibilities.append(InputPossibility.address())
    possibilities.extend(detect_public_key_types(value, chars))

    if not possibilities:
        raise InvalidInputError(f"Unable to classify input format: {value}", value)

    logger.debug("Classified %r as %s", value,
                 ", ".join(p.key_type.value if p.key_type else p.input_type.value for p in possibilities))
    return possibilities
