# chain_identifier/registry/registry.py
import logging
import threading
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from chain_identifier.core.config import load_config
from chain_identifier.core.exceptions import ChainIdentifierError, MetadataError
from chain_identifier.input.characteristics import InputCharacteristics
from chain_identifier.input.signature import CategorySignature
from chain_identifier.registry.converter import convert_chain_config
from chain_identifier.registry.loader import MetadataLoader
from chain_identifier.registry.metadata import AddressMetadata, ChainMetadata
from chain_identifier.registry.models import ChainConfig

logger = logging.getLogger(__name__)

class Registry:
    """
    Immutable view of every loaded chain.

    Built once per process through ``Registry.get()``; ``Registry.build()``
    creates an independent instance from any loader.
    """

    _instance: Optional['Registry'] = None
    _lock = threading.Lock()

    def __init__(self, chains: Tuple[ChainMetadata, ...], configs: Mapping[str, ChainConfig]):
        self._chains = chains
        self._by_id = MappingProxyType({chain.id: chain for chain in chains})
        self._configs = MappingProxyType(dict(configs))

        signatures: Dict[AddressMetadata, CategorySignature] = {}
        groups: Dict[CategorySignature, List[str]] = {}
        for chain in chains:
            for fmt in chain.address_formats:
                signature = signatures.setdefault(fmt, CategorySignature.from_metadata(fmt))
                members = groups.setdefault(signature, [])
                if chain.id not in members:
                    members.append(chain.id)
        self._signatures = MappingProxyType(signatures)
        self._signature_groups = MappingProxyType({s: tuple(ids) for s, ids in groups.items()})

    @classmethod
    def get(cls) -> 'Registry':
        """Process-wide registry, built lazily on first use"""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls.build(cls._default_loader())
        return cls._instance

    @staticmethod
    def _default_loader() -> MetadataLoader:
        return MetadataLoader(load_config().metadata_dir)

    @classmethod
    def build(cls, loader: MetadataLoader) -> 'Registry':
        index = loader.load_index()
        chains = []
        configs = {}
        for chain_id in index.chains:
            try:
                config = loader.load_chain(chain_id)
                chains.append(convert_chain_config(config))
                configs[chain_id] = config
            except ChainIdentifierError as e:
                logger.warning("Skipping chain %s: %s", chain_id, e)

        logger.info("Registry built with %d of %d chains", len(chains), len(index.chains))
        return cls(tuple(chains), configs)

    @property
    def chains(self) -> Tuple[ChainMetadata, ...]:
        return self._chains

    @property
    def signature_groups(self) -> Mapping[CategorySignature, Tuple[str, ...]]:
        return self._signature_groups

    def get_chain(self, chain_id: str) -> ChainMetadata:
        try:
            return self._by_id[chain_id]
        except KeyError:
            raise MetadataError(f"Unknown chain: {chain_id}") from None

    def get_chain_config(self, chain_id: str) -> ChainConfig:
        try:
            return self._configs[chain_id]
        except KeyError:
            raise MetadataError(f"Unknown chain: {chain_id}") from None

    def signature_for(self, fmt: AddressMetadata) -> CategorySignature:
        signature = self._signatures.get(fmt)
        if signature is None:
            signature = CategorySignature.from_metadata(fmt)
        return signature

    def candidate_chain_ids(self, chars: InputCharacteristics) -> Tuple[str, ...]:
        """Chains with at least one address format whose signature the input satisfies"""
        matched = set()
        for signature, chain_ids in self._signature_groups.items():
            if signature.matches(chars):
                matched.update(chain_ids)
        return tuple(chain.id for chain in self._chains if chain.id in matched)
