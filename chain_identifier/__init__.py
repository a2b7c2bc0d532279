from chain_identifier.identify import identify
from chain_identifier.core.types import (
    IdentificationCandidate, InputType, EncodingType, PublicKeyType
)
from chain_identifier.core.exceptions import ChainIdentifierError, InvalidInputError
from chain_identifier.registry.registry import Registry

__version__ = "0.1.0"
__all__ = [
    'identify',
    'IdentificationCandidate',
    'InputType',
    'EncodingType',
    'PublicKeyType',
    'ChainIdentifierError',
    'InvalidInputError',
    'Registry'
]
