# chain_identifier/checksum/ss58.py
from chain_identifier.crypto.hashing import blake2b_512

SS58_CONTEXT = b"SS58PRE"

def checksum_length(decoded_length: int) -> int:
    """Number of checksum bytes carried by an SS58 payload of the given decoded length"""
    # 35/36 bytes are 32-byte account ids under one and two byte prefixes
    if decoded_length in (35, 36):
        return 2
    if decoded_length < 64:
        return 1
    if decoded_length < 16384:
        return 2
    return 3

def compute_checksum(prefix_bytes: bytes, account_id: bytes, length: int = 2) -> bytes:
    return blake2b_512(SS58_CONTEXT + prefix_bytes + account_id)[:length]

def verify_checksum(prefix_bytes: bytes, account_id: bytes, checksum: bytes) -> bool:
    return compute_checksum(prefix_bytes, account_id, len(checksum)) == checksum
