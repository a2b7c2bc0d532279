# chain_identifier/registry/models.py
"""Shapes of the chain, curve and pipeline definition files"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from chain_identifier.core.exceptions import MetadataError

def _require(data: Dict[str, Any], key: str, source: str) -> Any:
    if key not in data or data[key] is None:
        raise MetadataError(f"{source}: missing required field '{key}'")
    return data[key]

def _length_range(value: Any, source: str) -> Optional[Tuple[int, int]]:
    if value is None:
        return None
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise MetadataError(f"{source}: length_range must be a [min, max] pair")
    low, high = int(value[0]), int(value[1])
    if low > high:
        raise MetadataError(f"{source}: length_range minimum exceeds maximum")
    return low, high

@dataclass(frozen=True)
class PublicKeyFormat:
    encoding: str
    exact_length: Optional[int] = None
    length_range: Optional[Tuple[int, int]] = None
    prefixes: Tuple[str, ...] = ()
    hrps: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: str = "public_key_format") -> 'PublicKeyFormat':
        exact = data.get('exact_length')
        return cls(
            encoding=str(_require(data, 'encoding', source)),
            exact_length=int(exact) if exact is not None else None,
            length_range=_length_range(data.get('length_range'), source),
            prefixes=tuple(str(p) for p in data.get('prefixes') or ()),
            hrps=tuple(str(h).lower() for h in data.get('hrps') or ()),
        )

@dataclass
class ChainConfig:
    """A chain definition as stored on disk"""
    id: str
    name: str
    curve: str
    address_pipeline: str
    address_params: Dict[str, Any] = field(default_factory=dict)
    requires_stake_key: bool = False
    public_key_formats: List[PublicKeyFormat] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ChainConfig':
        if not isinstance(data, dict):
            raise MetadataError("Chain definition must be a mapping")
        chain_id = str(_require(data, 'id', 'chain'))
        source = f"chain '{chain_id}'"
        params = data.get('address_params') or {}
        if not isinstance(params, dict):
            raise MetadataError(f"{source}: address_params must be a mapping")

        return cls(
            id=chain_id,
            name=str(data.get('name') or chain_id),
            curve=str(_require(data, 'curve', source)),
            address_pipeline=str(_require(data, 'address_pipeline', source)),
            address_params=dict(params),
            requires_stake_key=bool(data.get('requires_stake_key', False)),
            public_key_formats=[
                PublicKeyFormat.from_dict(f, source) for f in data.get('public_key_formats') or []
            ],
        )

@dataclass(frozen=True)
class CurveMetadata:
    id: str
    key_lengths: Tuple[int, ...]
    compression: bool
    compatible_pipelines: Tuple[str, ...]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CurveMetadata':
        curve_id = str(_require(data, 'id', 'curve'))
        return cls(
            id=curve_id,
            key_lengths=tuple(int(n) for n in _require(data, 'key_lengths', f"curve '{curve_id}'")),
            compression=bool(data.get('compression', False)),
            compatible_pipelines=tuple(data.get('compatible_pipelines') or ()),
        )

@dataclass(frozen=True)
class PipelineStep:
    type: str
    algorithm: Optional[str] = None
    input: Optional[str] = None
    output: Optional[str] = None
    format: Optional[str] = None
    prefix: Optional[str] = None
    prefix_byte: Optional[int] = None
    start: Optional[int] = None
    end: Optional[int] = None

@dataclass(frozen=True)
class AddressPipeline:
    id: str
    curve: str
    steps: Tuple[PipelineStep, ...]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AddressPipeline':
        pipeline_id = str(_require(data, 'id', 'pipeline'))
        source = f"pipeline '{pipeline_id}'"
        steps = []
        for step in _require(data, 'steps', source):
            try:
                steps.append(PipelineStep(**step))
            except TypeError as e:
                raise MetadataError(f"{source}: invalid step {step!r}: {e}") from e
        return cls(id=pipeline_id, curve=str(_require(data, 'curve', source)), steps=tuple(steps))

@dataclass(frozen=True)
class MetadataIndex:
    curves: Tuple[str, ...]
    pipelines: Tuple[str, ...]
    chains: Tuple[str, ...]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MetadataIndex':
        if not isinstance(data, dict):
            raise MetadataError("Metadata index must be a mapping")
        pipelines = data.get('pipelines') or {}
        return cls(
            curves=tuple(data.get('curves') or ()),
            pipelines=tuple(pipelines.get('addresses') or ()),
            chains=tuple(_require(data, 'chains', 'index')),
        )
