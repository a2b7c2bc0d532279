# chain_identifier/crypto/hashing.py
import hashlib

from Crypto.Hash import keccak, RIPEMD160

SHA256_DIGEST_SIZE = 32
RIPEMD160_DIGEST_SIZE = 20
KECCAK256_DIGEST_SIZE = 32

def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()

def double_sha256(data: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()

def keccak256(data: bytes) -> bytes:
    """Original Keccak-256 as used by Ethereum (not NIST SHA3-256)"""
    return keccak.new(digest_bits=256, data=data).digest()

def ripemd160(data: bytes) -> bytes:
    # hashlib's ripemd160 depends on the OpenSSL build, pycryptodome always has it
    return RIPEMD160.new(data).digest()

def hash160(data: bytes) -> bytes:
    """RIPEMD160(SHA256(data))"""
    return ripemd160(sha256(data))

def blake2b_256(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=32).digest()

def blake2b_512(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=64).digest()

def sha3_256(data: bytes) -> bytes:
    return hashlib.sha3_256(data).digest()
