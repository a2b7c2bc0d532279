# chain_identifier/checksum/base58check.py
from typing import Optional, Tuple

from chain_identifier.core.exceptions import EncodingError
from chain_identifier.crypto.hashing import double_sha256
from chain_identifier.encoding import base58

CHECKSUM_SIZE = 4
PAYLOAD_SIZE = 20
DECODED_SIZE = 1 + PAYLOAD_SIZE + CHECKSUM_SIZE

def checksum(data: bytes) -> bytes:
    return double_sha256(data)[:CHECKSUM_SIZE]

def validate(value: str) -> Optional[Tuple[int, bytes]]:
    """(version, payload) for a checksum-valid 25-byte Base58Check string, else None"""
    try:
        data = base58.decode(value)
    except EncodingError:
        return None

    if len(data) != DECODED_SIZE:
        return None

    body, check = data[:-CHECKSUM_SIZE], data[-CHECKSUM_SIZE:]
    if checksum(body) != check:
        return None

    return body[0], body[1:]

def encode(version: int, payload: bytes) -> str:
    if not 0 <= version <= 0xFF:
        raise EncodingError(f"Base58Check version must be a single byte: {version}")
    body = bytes([version]) + payload
    return base58.encode(body + checksum(body))
