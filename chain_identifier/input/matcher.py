# chain_identifier/input/matcher.py
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, TYPE_CHECKING

from chain_identifier.input.characteristics import InputCharacteristics
from chain_identifier.input.classifier import InputPossibility

if TYPE_CHECKING:
    from chain_identifier.registry.metadata import AddressMetadata, PublicKeyMetadata
    from chain_identifier.registry.registry import Registry

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ChainMatch:
    """A chain format the input structurally fits, before checksum scoring or derivation"""
    chain_id: str
    chain_name: str
    possibility: InputPossibility
    address_metadata: Optional['AddressMetadata'] = None
    public_key_metadata: Optional['PublicKeyMetadata'] = None

    @property
    def is_address(self) -> bool:
        return self.address_metadata is not None

def match_input_with_metadata(value: str, chars: InputCharacteristics,
                              possibilities: Sequence[InputPossibility],
                              registry: 'Registry') -> List[ChainMatch]:
    """
    Pair the input with every chain format it could belong to.

    At most one address match and one public key match per chain; an empty
    result is legal.
    """
    matches = []
    address_possibility = next((p for p in possibilities if p.is_address), None)
    key_possibilities = [p for p in possibilities if not p.is_address]
    address_chains = set(registry.candidate_chain_ids(chars)) if address_possibility else set()

    for chain in registry.chains:
        if chain.id in address_chains:
            for fmt in chain.address_formats:
                if registry.signature_for(fmt).matches(chars) and fmt.validate_raw(value, chars):
                    matches.append(ChainMatch(chain.id, chain.name, address_possibility, address_metadata=fmt))
                    break

        key_match = _match_public_key(chain, value, chars, key_possibilities)
        if key_match is not None:
            matches.append(key_match)

    logger.debug("Input %r matched %d chain formats", value, len(matches))
    return matches

def _accepts(fmt: 'PublicKeyMetadata', possibility: InputPossibility) -> bool:
    """Same curve, key bytes decoded from the format's alphabet, length accepted"""
    return (possibility.key_type is fmt.key_type
            and possibility.encoding.char_set is fmt.encoding.char_set
            and fmt.accepts_key_length(possibility.key_form.key_length))

def _match_public_key(chain, value: str, chars: InputCharacteristics,
                      key_possibilities: Sequence[InputPossibility]) -> Optional[ChainMatch]:
    for fmt in chain.public_key_formats:
        if not fmt.accepts_input(value, chars):
            continue
        for possibility in key_possibilities:
            if _accepts(fmt, possibility):
                return ChainMatch(chain.id, chain.name, possibility, public_key_metadata=fmt)
    return None
