# chain_identifier/pipelines/cosmos.py
from typing import Any, Dict

from chain_identifier.core.exceptions import DerivationError
from chain_identifier.crypto.hashing import sha256
from chain_identifier.encoding import bech32

DEFAULT_HRP = "cosmos"

def derive(public_key: bytes, params: Dict[str, Any]) -> str:
    if len(public_key) != 32:
        raise DerivationError(f"Cosmos derivation requires a 32-byte key, got {len(public_key)} bytes")
    hrp = str(params.get('hrp') or (params.get('hrps') or [DEFAULT_HRP])[0])
    return bech32.encode_bytes(hrp, sha256(public_key)[:20])
