# chain_identifier/pipelines/ss58.py
from typing import Any, Dict

from chain_identifier.core.exceptions import DerivationError
from chain_identifier.crypto.hashing import blake2b_256
from chain_identifier.crypto.secp256k1 import extract_64_bytes
from chain_identifier.encoding import ss58

DEFAULT_PREFIX = 0

def account_id(public_key: bytes) -> bytes:
    if len(public_key) == 32:
        return public_key
    if len(public_key) in (33, 64, 65):
        # secp256k1 keys are hashed down to a 32-byte account id
        return blake2b_256(extract_64_bytes(public_key))
    raise DerivationError(
        f"SS58 derivation requires a 32, 33, 64 or 65 byte key, got {len(public_key)} bytes"
    )

def derive(public_key: bytes, params: Dict[str, Any]) -> str:
    return ss58.encode(int(params.get('prefix', DEFAULT_PREFIX)), account_id(public_key))
