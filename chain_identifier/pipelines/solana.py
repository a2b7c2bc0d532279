# chain_identifier/pipelines/solana.py
from typing import Any, Dict

from chain_identifier.core.exceptions import DerivationError
from chain_identifier.encoding import base58

def derive(public_key: bytes, params: Dict[str, Any]) -> str:
    if len(public_key) != 32:
        raise DerivationError(f"Solana derivation requires a 32-byte key, got {len(public_key)} bytes")
    return base58.encode(public_key)
