# chain_identifier/pipelines/bitcoin.py
from typing import Any, Dict

from chain_identifier.checksum import base58check
from chain_identifier.crypto.hashing import hash160
from chain_identifier.crypto.secp256k1 import extract_64_bytes
from chain_identifier.encoding import bech32

DEFAULT_VERSION_BYTE = 0x00
DEFAULT_HRP = "bc"

def derive_p2pkh(public_key: bytes, params: Dict[str, Any]) -> str:
    version = int(params.get('version_byte', DEFAULT_VERSION_BYTE))
    return base58check.encode(version, hash160(extract_64_bytes(public_key)))

def derive_bech32(public_key: bytes, params: Dict[str, Any]) -> str:
    hrp = str(params.get('hrp', DEFAULT_HRP))
    return bech32.encode_bytes(hrp, hash160(extract_64_bytes(public_key)))
