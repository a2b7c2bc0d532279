# chain_identifier/pipelines/evm.py
from typing import Any, Dict

from chain_identifier.crypto.hashing import keccak256
from chain_identifier.crypto.secp256k1 import extract_64_bytes
from chain_identifier.encoding import hex

def evm_account_bytes(public_key: bytes) -> bytes:
    """Last 20 bytes of keccak256 over the X||Y coordinates"""
    return keccak256(extract_64_bytes(public_key))[12:]

def derive(public_key: bytes, params: Dict[str, Any]) -> str:
    return hex.encode(evm_account_bytes(public_key))
