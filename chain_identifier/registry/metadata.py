# chain_identifier/registry/metadata.py
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from chain_identifier.checksum import base58check
from chain_identifier.core.exceptions import ChainIdentifierError
from chain_identifier.core.types import (
    CharSet, ChecksumType, EncodingType, Network, PublicKeyType
)
from chain_identifier.encoding import base58, bech32, hex, ss58
from chain_identifier.input.characteristics import InputCharacteristics

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class AddressMetadata:
    """One accepted address format of a chain"""
    encoding: EncodingType
    char_set: Optional[CharSet] = None
    exact_length: Optional[int] = None
    length_range: Optional[Tuple[int, int]] = None
    prefixes: Tuple[str, ...] = ()
    hrps: Tuple[str, ...] = ()
    version_bytes: Tuple[int, ...] = ()
    checksum: Optional[ChecksumType] = None
    network: Network = Network.MAINNET

    def length_matches(self, length: int) -> bool:
        if self.exact_length is not None:
            return length == self.exact_length
        if self.length_range is not None:
            return self.length_range[0] <= length <= self.length_range[1]
        return True

    def validate_raw(self, raw: str, chars: InputCharacteristics) -> bool:
        """Structural acceptance of a raw string, including a full checksum decode"""
        if chars.encodings and self.encoding not in chars.encodings:
            return False
        if not self.length_matches(len(raw)):
            return False

        # Base58Check prefixes follow from the version byte
        skip_prefix = self.encoding is EncodingType.BASE58CHECK and self.version_bytes
        if self.prefixes and not skip_prefix and not any(raw.startswith(p) for p in self.prefixes):
            return False
        if self.hrps and chars.hrp not in self.hrps:
            return False

        try:
            return self._decodes(raw)
        except ChainIdentifierError as e:
            logger.debug("Structural validation of %r as %s failed: %s", raw, self.encoding.value, e)
            return False

    def _decodes(self, raw: str) -> bool:
        if self.encoding is EncodingType.HEX:
            hex.decode(raw)
            return True
        if self.encoding in (EncodingType.BECH32, EncodingType.BECH32M):
            return bech32.decode(raw).variant.encoding is self.encoding
        if self.encoding is EncodingType.BASE58CHECK:
            decoded = base58check.validate(raw)
            if decoded is None:
                return False
            return not self.version_bytes or decoded[0] in self.version_bytes
        if self.encoding is EncodingType.SS58:
            address = ss58.decode(raw)
            return not self.version_bytes or address.prefix in self.version_bytes
        if self.encoding is EncodingType.BASE58:
            base58.decode(raw)
            return True
        return False

@dataclass(frozen=True)
class PublicKeyMetadata:
    """One accepted public key format of a chain; lengths are in decoded bytes"""
    encoding: EncodingType
    key_type: PublicKeyType
    char_set: Optional[CharSet] = None
    exact_length: Optional[int] = None
    length_range: Optional[Tuple[int, int]] = None
    prefixes: Tuple[str, ...] = ()
    hrps: Tuple[str, ...] = ()

    def accepts_key_length(self, length: int) -> bool:
        if self.exact_length is not None:
            return length == self.exact_length
        if self.length_range is not None:
            return self.length_range[0] <= length <= self.length_range[1]
        return True

    def accepts_input(self, value: str, chars: InputCharacteristics) -> bool:
        """Required string prefixes (case-insensitive) and HRPs of the encoded key"""
        if self.prefixes and not any(value.lower().startswith(p.lower()) for p in self.prefixes):
            return False
        if self.hrps and chars.hrp not in self.hrps:
            return False
        return True

@dataclass(frozen=True)
class ChainMetadata:
    id: str
    name: str
    address_formats: Tuple[AddressMetadata, ...]
    public_key_formats: Tuple[PublicKeyMetadata, ...]
