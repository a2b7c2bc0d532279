# chain_identifier/detectors/public_key.py
import logging
from typing import Optional, TYPE_CHECKING

from chain_identifier.core.exceptions import DerivationError
from chain_identifier.core.types import IdentificationCandidate, InputType
from chain_identifier.encoding.raw import decode_raw
from chain_identifier.input.characteristics import InputCharacteristics, extract_characteristics
from chain_identifier.input.matcher import ChainMatch
from chain_identifier.pipelines.dispatcher import execute_pipeline

if TYPE_CHECKING:
    from chain_identifier.registry.registry import Registry

logger = logging.getLogger(__name__)

DERIVED_CONFIDENCE = 0.8

def detect_public_key(value: str, chars: InputCharacteristics, match: ChainMatch,
                      registry: 'Registry') -> Optional[IdentificationCandidate]:
    """
    Derive the chain's address from a public key and check it round-trips.

    Returns None for chains that cannot be derived from a single key; raises
    DerivationError (or another identification error) when derivation fails.
    """
    config = registry.get_chain_config(match.chain_id)
    if config.requires_stake_key:
        logger.debug("Skipping %s: address requires a stake key", match.chain_id)
        return None

    key = decode_raw(value, match.possibility.encoding)

    key_format = match.public_key_metadata
    if key_format is not None and not key_format.accepts_key_length(len(key)):
        raise DerivationError(f"{len(key)}-byte key not accepted by {match.chain_id}")

    derived = execute_pipeline(config.address_pipeline, key, config.address_params)

    derived_chars = extract_characteristics(derived)
    chain = registry.get_chain(match.chain_id)
    target = next(
        (fmt for fmt in chain.address_formats if fmt.validate_raw(derived, derived_chars)),
        None
    )
    if target is None:
        raise DerivationError(f"Derived address {derived} fails {match.chain_id} address validation")

    return IdentificationCandidate(
        input_type=InputType.PUBLIC_KEY,
        chain=match.chain_id,
        encoding=target.encoding,
        normalized=derived,
        confidence=DERIVED_CONFIDENCE,
        reasoning=(
            f"{match.possibility.key_type.value} public key, derived {target.encoding.label} "
            f"address via {config.address_pipeline} pipeline"
        ),
    )
