# chain_identifier/identify.py
import logging
from typing import List, Optional

from chain_identifier.core.exceptions import ChainIdentifierError, InvalidInputError
from chain_identifier.core.types import IdentificationCandidate
from chain_identifier.detectors.address import detect_address
from chain_identifier.detectors.public_key import detect_public_key
from chain_identifier.input.characteristics import extract_characteristics
from chain_identifier.input.classifier import classify_input
from chain_identifier.input.matcher import match_input_with_metadata
from chain_identifier.registry.registry import Registry

logger = logging.getLogger(__name__)

def identify(value: str, registry: Optional[Registry] = None) -> List[IdentificationCandidate]:
    """
    Identify which chains an address or public key string could belong to.

    Returns candidates sorted by descending confidence. Raises
    InvalidInputError when the input cannot be classified or no chain
    format survives validation.
    """
    registry = registry or Registry.get()

    chars = extract_characteristics(value)
    possibilities = classify_input(value, chars)
    matches = match_input_with_metadata(value, chars, possibilities, registry)

    candidates = []
    for match in matches:
        try:
            if match.is_address:
                candidate = detect_address(value, chars, match.address_metadata, match.chain_id)
            else:
                candidate = detect_public_key(value, chars, match, registry)
        except ChainIdentifierError as e:
            logger.debug("Discarding %s candidate for %s: %s", match.chain_id, value, e)
            continue
        if candidate is not None:
            candidates.append(candidate)

    if not candidates:
        raise InvalidInputError(f"Unable to identify address format: {value}", value)

    # sorted() is stable, so equal confidences keep registry order
    candidates = sorted(candidates, key=lambda c: c.confidence, reverse=True)
    logger.debug("Identified %r as %s", value, [(c.chain, c.input_type.value) for c in candidates])
    return candidates
