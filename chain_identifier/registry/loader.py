# chain_identifier/registry/loader.py
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from chain_identifier.core.exceptions import MetadataError
from chain_identifier.registry.models import (
    AddressPipeline, ChainConfig, CurveMetadata, MetadataIndex
)

logger = logging.getLogger(__name__)

DEFAULT_METADATA_DIR = Path(__file__).resolve().parent.parent / "metadata"

class MetadataLoader:
    """Reads chain, curve and pipeline definitions from a metadata directory"""

    INDEX_FILE = "index.yaml"

    def __init__(self, base_dir: Optional[Union[str, Path]] = None):
        self.base_dir = Path(base_dir) if base_dir is not None else DEFAULT_METADATA_DIR

    def _read(self, relative: str) -> Dict[str, Any]:
        path = self.base_dir / relative
        if not path.is_file():
            raise MetadataError(f"Metadata file not found: {path}")
        logger.debug("Loading metadata from %s", path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise MetadataError(f"Invalid YAML in {path}: {e}") from e
        except OSError as e:
            raise MetadataError(f"Cannot read {path}: {e}") from e

        if not isinstance(data, dict):
            raise MetadataError(f"{path} must contain a mapping")
        return data

    def load_index(self) -> MetadataIndex:
        return MetadataIndex.from_dict(self._read(self.INDEX_FILE))

    def load_chain(self, chain_id: str) -> ChainConfig:
        config = ChainConfig.from_dict(self._read(f"chains/{chain_id}.yaml"))
        if config.id != chain_id:
            raise MetadataError(f"Chain file '{chain_id}.yaml' declares id '{config.id}'")
        return config

    def load_curve(self, curve_id: str) -> CurveMetadata:
        return CurveMetadata.from_dict(self._read(f"curves/{curve_id}.yaml"))

    def load_pipeline(self, pipeline_id: str) -> AddressPipeline:
        return AddressPipeline.from_dict(self._read(f"pipelines/addresses/{pipeline_id}.yaml"))
