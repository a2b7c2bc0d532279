from chain_identifier.registry.metadata import AddressMetadata, ChainMetadata, PublicKeyMetadata
from chain_identifier.registry.models import (
    ChainConfig, PublicKeyFormat, CurveMetadata, AddressPipeline, PipelineStep, MetadataIndex
)
from chain_identifier.registry.loader import MetadataLoader
from chain_identifier.registry.converter import convert_chain_config
from chain_identifier.registry.registry import Registry
from chain_identifier.registry.validation import validate_metadata

__all__ = [
    'AddressMetadata',
    'ChainMetadata',
    'PublicKeyMetadata',
    'ChainConfig',
    'PublicKeyFormat',
    'CurveMetadata',
    'AddressPipeline',
    'PipelineStep',
    'MetadataIndex',
    'MetadataLoader',
    'convert_chain_config',
    'Registry',
    'validate_metadata'
]
