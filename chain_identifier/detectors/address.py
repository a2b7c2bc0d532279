# chain_identifier/detectors/address.py
import logging
from typing import List, Optional, Tuple

from chain_identifier.checksum import base58check, eip55
from chain_identifier.core.exceptions import ChainIdentifierError
from chain_identifier.core.types import (
    ChecksumType, EncodingType, IdentificationCandidate, InputType
)
from chain_identifier.encoding import bech32, ss58
from chain_identifier.encoding.bech32 import Bech32Variant
from chain_identifier.input.characteristics import InputCharacteristics
from chain_identifier.registry.metadata import AddressMetadata

logger = logging.getLogger(__name__)

BASE_CONFIDENCE = 0.5
CHECKSUM_BONUS = 0.3
REQUIREMENT_BONUS = 0.1
EXACT_LENGTH_BONUS = 0.05

_BECH32_VARIANTS = {
    ChecksumType.BECH32: Bech32Variant.BECH32,
    ChecksumType.BECH32M: Bech32Variant.BECH32M,
}

class _Rejected(Exception):
    pass

def _verify_checksum(value: str, metadata: AddressMetadata, reasons: List[str]) -> Tuple[bool, bool]:
    """Returns (checksum valid, version requirement satisfied); raises _Rejected on mismatch"""
    checksum = metadata.checksum
    if checksum is None:
        return False, False

    if checksum is ChecksumType.EIP55:
        if not eip55.is_checksummed(value):
            reasons.append("no checksum casing")
            return False, False
        if not eip55.validate(value):
            raise _Rejected("EIP-55 checksum mismatch")
        return True, False

    if checksum is ChecksumType.BASE58CHECK:
        decoded = base58check.validate(value)
        if decoded is None:
            raise _Rejected("Base58Check checksum mismatch")
        if metadata.version_bytes and decoded[0] not in metadata.version_bytes:
            raise _Rejected(f"version byte {decoded[0]:#04x} not accepted")
        return True, bool(metadata.version_bytes)

    if checksum in _BECH32_VARIANTS:
        decoded = bech32.decode(value)
        if decoded.variant is not _BECH32_VARIANTS[checksum]:
            raise _Rejected(f"expected {checksum.value}, got {decoded.variant.encoding.value}")
        return True, False

    if checksum is ChecksumType.SS58:
        address = ss58.decode(value)
        if metadata.version_bytes and address.prefix not in metadata.version_bytes:
            raise _Rejected(f"SS58 prefix {address.prefix} not accepted")
        return True, bool(metadata.version_bytes)

    raise _Rejected(f"unsupported checksum {checksum}")

def normalize_address(value: str, encoding: EncodingType) -> str:
    if encoding is EncodingType.HEX:
        return eip55.normalize(value)
    if encoding in (EncodingType.BECH32, EncodingType.BECH32M):
        return value.lower()
    return value

def detect_address(value: str, chars: InputCharacteristics, metadata: AddressMetadata,
                   chain_id: str) -> Optional[IdentificationCandidate]:
    """Score an address match; None when the authoritative checks reject it"""
    reasons = [f"{metadata.encoding.label} address"]
    try:
        checksum_valid, version_ok = _verify_checksum(value, metadata, reasons)
        hrp_ok = False
        if metadata.hrps:
            if chars.hrp not in metadata.hrps:
                raise _Rejected(f"HRP {chars.hrp!r} not accepted")
            hrp_ok = True
        normalized = normalize_address(value, metadata.encoding)
    except (_Rejected, ChainIdentifierError) as e:
        logger.debug("Rejected %r for %s: %s", value, chain_id, e)
        return None

    confidence = BASE_CONFIDENCE
    if checksum_valid:
        confidence += CHECKSUM_BONUS
        reasons.append("valid checksum")
    if version_ok:
        confidence += REQUIREMENT_BONUS
        reasons.append("valid version bytes")
    elif hrp_ok:
        confidence += REQUIREMENT_BONUS
        reasons.append(f"valid HRP '{chars.hrp}'")
    if metadata.exact_length is not None:
        confidence += EXACT_LENGTH_BONUS
        reasons.append("exact length")

    return IdentificationCandidate(
        input_type=InputType.ADDRESS,
        chain=chain_id,
        encoding=metadata.encoding,
        normalized=normalized,
        confidence=min(confidence, 1.0),
        reasoning=", ".join(reasons),
    )
