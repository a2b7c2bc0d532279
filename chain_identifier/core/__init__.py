from .types import (
    EncodingType, CharSet, ChecksumType, Network, PublicKeyType,
    InputType, EntropyClass, IdentificationCandidate
)
from .exceptions import (
    ChainIdentifierError, InvalidInputError, EncodingError, ChecksumError,
    DerivationError, PipelineError, MetadataError, ConfigError
)
from .config import IdentifierConfig, LoggingConfig, load_config

__all__ = [
    'EncodingType',
    'CharSet',
    'ChecksumType',
    'Network',
    'PublicKeyType',
    'InputType',
    'EntropyClass',
    'IdentificationCandidate',
    'ChainIdentifierError',
    'InvalidInputError',
    'EncodingError',
    'ChecksumError',
    'DerivationError',
    'PipelineError',
    'MetadataError',
    'ConfigError',
    'IdentifierConfig',
    'LoggingConfig',
    'load_config'
]
