# chain_identifier/core/types.py
from enum import Enum
from dataclasses import dataclass
from typing import Dict, Any

class EncodingType(Enum):
    """String encodings an address or key may use"""
    HEX = "hex"
    BASE58 = "base58"
    BASE58CHECK = "base58check"
    BECH32 = "bech32"
    BECH32M = "bech32m"
    SS58 = "ss58"

    @property
    def label(self) -> str:
        return _ENCODING_LABELS[self]

    @property
    def char_set(self) -> 'CharSet':
        return _ENCODING_CHAR_SETS[self]

    @classmethod
    def from_name(cls, name: str) -> 'EncodingType':
        """Resolve a metadata encoding string, case-insensitively"""
        return cls(name.strip().lower())

_ENCODING_LABELS = {
    EncodingType.HEX: "Hex",
    EncodingType.BASE58: "Base58",
    EncodingType.BASE58CHECK: "Base58Check",
    EncodingType.BECH32: "Bech32",
    EncodingType.BECH32M: "Bech32m",
    EncodingType.SS58: "SS58",
}

class CharSet(Enum):
    """Character alphabets"""
    HEX = "hex"
    BASE58 = "base58"
    BASE32 = "base32"
    ALPHANUMERIC = "alphanumeric"

_ENCODING_CHAR_SETS = {
    EncodingType.HEX: CharSet.HEX,
    EncodingType.BASE58: CharSet.BASE58,
    EncodingType.BASE58CHECK: CharSet.BASE58,
    EncodingType.SS58: CharSet.BASE58,
    EncodingType.BECH32: CharSet.BASE32,
    EncodingType.BECH32M: CharSet.BASE32,
}

class ChecksumType(Enum):
    """Checksum schemes verified by the detector"""
    EIP55 = "eip55"
    BASE58CHECK = "base58check"
    BECH32 = "bech32"
    BECH32M = "bech32m"
    SS58 = "ss58"

class Network(Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"

class PublicKeyType(Enum):
    """Curves a public key can belong to"""
    SECP256K1 = "secp256k1"
    ED25519 = "ed25519"
    SR25519 = "sr25519"

class InputType(Enum):
    ADDRESS = "address"
    PUBLIC_KEY = "public_key"

class EntropyClass(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

@dataclass(frozen=True)
class IdentificationCandidate:
    """One ranked answer to 'which chain could this input belong to'"""
    input_type: InputType
    chain: str
    encoding: EncodingType
    normalized: str
    confidence: float
    reasoning: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'input_type': self.input_type.value,
            'chain': self.chain,
            'encoding': self.encoding.value,
            'normalized': self.normalized,
            'confidence': round(self.confidence, 4),
            'reasoning': self.reasoning,
        }
