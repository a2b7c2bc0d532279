# chain_identifier/pipelines/dispatcher.py
import logging
from typing import Any, Callable, Dict, Optional

from chain_identifier.core.exceptions import EncodingError, DerivationError, PipelineError
from chain_identifier.pipelines import bitcoin, cardano, cosmos, evm, solana, ss58, tron

logger = logging.getLogger(__name__)

PIPELINES: Dict[str, Callable[[bytes, Dict[str, Any]], str]] = {
    'evm': evm.derive,
    'bitcoin_p2pkh': bitcoin.derive_p2pkh,
    'bitcoin_bech32': bitcoin.derive_bech32,
    'cosmos': cosmos.derive,
    'solana': solana.derive,
    'ss58': ss58.derive,
    'cardano': cardano.derive,
    'tron': tron.derive,
}

def is_supported(pipeline_id: str) -> bool:
    return pipeline_id in PIPELINES

def execute_pipeline(pipeline_id: str, public_key: bytes, params: Optional[Dict[str, Any]] = None) -> str:
    """Derive an address string from raw public key bytes"""
    derive = PIPELINES.get(pipeline_id)
    if derive is None:
        raise PipelineError(f"Unknown address pipeline: {pipeline_id}")

    try:
        address = derive(public_key, params or {})
    except EncodingError as e:
        raise DerivationError(f"{pipeline_id} pipeline could not encode address: {e}") from e
    except (TypeError, ValueError) as e:
        raise DerivationError(f"{pipeline_id} pipeline received invalid parameters: {e}") from e

    logger.debug("Pipeline %s derived %s", pipeline_id, address)
    return address
