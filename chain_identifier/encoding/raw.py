# chain_identifier/encoding/raw.py
from chain_identifier.core.exceptions import EncodingError
from chain_identifier.core.types import EncodingType
from chain_identifier.encoding import base58, bech32, hex

def decode_raw(value: str, encoding: EncodingType) -> bytes:
    """Decode a string to its underlying bytes under one encoding, without interpreting them"""
    if encoding is EncodingType.HEX:
        return hex.decode(value)
    if encoding in (EncodingType.BASE58, EncodingType.BASE58CHECK, EncodingType.SS58):
        return base58.decode(value)
    if encoding in (EncodingType.BECH32, EncodingType.BECH32M):
        _, payload, _ = bech32.decode_to_bytes(value)
        return payload
    raise EncodingError(f"Unsupported encoding: {encoding}")
