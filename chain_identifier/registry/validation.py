# chain_identifier/registry/validation.py
import logging
from typing import Dict, List

from chain_identifier.core.exceptions import ChainIdentifierError
from chain_identifier.pipelines.dispatcher import is_supported
from chain_identifier.registry.converter import convert_chain_config
from chain_identifier.registry.loader import MetadataLoader
from chain_identifier.registry.models import AddressPipeline, CurveMetadata

logger = logging.getLogger(__name__)

def validate_metadata(loader: MetadataLoader) -> List[str]:
    """Cross-check chain, curve and pipeline definitions; returns a list of problems"""
    problems = []
    try:
        index = loader.load_index()
    except ChainIdentifierError as e:
        return [str(e)]

    curves: Dict[str, CurveMetadata] = {}
    for curve_id in index.curves:
        try:
            curves[curve_id] = loader.load_curve(curve_id)
        except ChainIdentifierError as e:
            problems.append(f"curve '{curve_id}': {e}")

    pipelines: Dict[str, AddressPipeline] = {}
    for pipeline_id in index.pipelines:
        if not is_supported(pipeline_id):
            problems.append(f"pipeline '{pipeline_id}': no derivation implementation")
        try:
            pipelines[pipeline_id] = loader.load_pipeline(pipeline_id)
        except ChainIdentifierError as e:
            problems.append(f"pipeline '{pipeline_id}': {e}")

    for chain_id in index.chains:
        try:
            config = loader.load_chain(chain_id)
            convert_chain_config(config)
        except ChainIdentifierError as e:
            problems.append(f"chain '{chain_id}': {e}")
            continue

        if config.curve not in index.curves:
            problems.append(f"chain '{chain_id}': curve '{config.curve}' not listed in index")
        if config.address_pipeline not in index.pipelines:
            problems.append(f"chain '{chain_id}': pipeline '{config.address_pipeline}' not listed in index")

        curve = curves.get(config.curve)
        if curve is not None and config.address_pipeline not in curve.compatible_pipelines:
            problems.append(
                f"chain '{chain_id}': pipeline '{config.address_pipeline}' "
                f"not compatible with curve '{config.curve}'"
            )

        pipeline = pipelines.get(config.address_pipeline)
        if pipeline is not None and pipeline.curve != config.curve and pipeline.curve != "any":
            problems.append(
                f"chain '{chain_id}': pipeline '{pipeline.id}' expects curve '{pipeline.curve}'"
            )

    for problem in problems:
        logger.warning("Metadata problem: %s", problem)
    return problems
