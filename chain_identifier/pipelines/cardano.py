# chain_identifier/pipelines/cardano.py
from typing import Any, Dict

from chain_identifier.core.exceptions import DerivationError
from chain_identifier.crypto.hashing import sha3_256
from chain_identifier.encoding import bech32

DEFAULT_HRP = "addr"
DEFAULT_HEADER = 0x00

def derive(public_key: bytes, params: Dict[str, Any]) -> str:
    if len(public_key) != 32:
        raise DerivationError(f"Cardano derivation requires a 32-byte key, got {len(public_key)} bytes")
    header = int(params.get('header', DEFAULT_HEADER))
    hrp = str(params.get('hrp') or (params.get('hrps') or [DEFAULT_HRP])[0])
    return bech32.encode_bytes(hrp, bytes([header]) + sha3_256(public_key)[:28])
