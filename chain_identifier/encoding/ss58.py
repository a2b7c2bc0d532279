# chain_identifier/encoding/ss58.py
from dataclasses import dataclass
from typing import Tuple

from chain_identifier.checksum.ss58 import checksum_length, compute_checksum, verify_checksum
from chain_identifier.core.exceptions import ChecksumError, EncodingError
from chain_identifier.encoding import base58

ACCOUNT_ID_LENGTH = 32
MIN_DECODED_LENGTH = 35
MAX_DECODED_LENGTH = 50
MAX_PREFIX = 16383

# Network prefixes with a dedicated chain
KNOWN_PREFIXES = {
    0: "polkadot",
    2: "kusama",
    42: "substrate",
}

@dataclass(frozen=True)
class SS58Address:
    prefix: int
    account_id: bytes

    @property
    def network(self) -> str:
        return KNOWN_PREFIXES.get(self.prefix, "generic")

def encode_prefix(prefix: int) -> bytes:
    if prefix < 0 or prefix > MAX_PREFIX:
        raise EncodingError(f"SS58 prefix out of range: {prefix}")
    if prefix < 64:
        return bytes([prefix])
    return bytes([0x40 | ((prefix >> 8) & 0x3F), prefix & 0xFF])

def decode_prefix(data: bytes) -> Tuple[int, int]:
    """Return (prefix, prefix length in bytes) from the head of a decoded payload"""
    if not data:
        raise EncodingError("Empty SS58 payload")
    first = data[0]
    if first < 64:
        return first, 1
    if first < 128:
        if len(data) < 2:
            raise EncodingError("Truncated two-byte SS58 prefix")
        return ((first & 0x3F) << 8) | data[1], 2
    raise EncodingError(f"Reserved SS58 prefix byte: {first:#04x}")

def decode(value: str) -> SS58Address:
    """Decode an SS58 string, verifying its checksum"""
    data = base58.decode(value)
    if not MIN_DECODED_LENGTH <= len(data) <= MAX_DECODED_LENGTH:
        raise EncodingError(f"Invalid SS58 payload length: {len(data)} bytes")

    prefix, prefix_length = decode_prefix(data)
    n = checksum_length(len(data))
    account_id = data[prefix_length:len(data) - n]
    if len(account_id) != ACCOUNT_ID_LENGTH:
        raise EncodingError(f"Invalid SS58 account id length: {len(account_id)} bytes")

    if not verify_checksum(data[:prefix_length], account_id, data[len(data) - n:]):
        raise ChecksumError("SS58 checksum mismatch")

    return SS58Address(prefix, account_id)

def encode(prefix: int, account_id: bytes) -> str:
    if len(account_id) != ACCOUNT_ID_LENGTH:
        raise EncodingError(f"SS58 account id must be {ACCOUNT_ID_LENGTH} bytes, got {len(account_id)}")
    prefix_bytes = encode_prefix(prefix)
    body = prefix_bytes + account_id
    n = checksum_length(len(body) + 2)
    return base58.encode(body + compute_checksum(prefix_bytes, account_id, n))
