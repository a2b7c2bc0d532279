# chain_identifier/pipelines/tron.py
from typing import Any, Dict

from chain_identifier.checksum import base58check
from chain_identifier.pipelines.evm import evm_account_bytes

TRON_VERSION_BYTE = 0x41

def derive(public_key: bytes, params: Dict[str, Any]) -> str:
    return base58check.encode(TRON_VERSION_BYTE, evm_account_bytes(public_key))
