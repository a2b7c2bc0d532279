"""Unit tests for category signatures."""

import math

from chain_identifier.core.types import CharSet, ChecksumType, EncodingType
from chain_identifier.input.characteristics import extract_characteristics
from chain_identifier.input.signature import CategorySignature
from chain_identifier.registry.metadata import AddressMetadata

SOLANA_FORMAT = AddressMetadata(
    encoding=EncodingType.BASE58,
    char_set=CharSet.BASE58,
    length_range=(32, 44),
)
EVM_FORMAT = AddressMetadata(
    encoding=EncodingType.HEX,
    char_set=CharSet.HEX,
    exact_length=42,
    prefixes=("0x",),
    checksum=ChecksumType.EIP55,
)
SEGWIT_FORMAT = AddressMetadata(
    encoding=EncodingType.BECH32,
    char_set=CharSet.BASE32,
    length_range=(14, 74),
    hrps=("bc",),
    checksum=ChecksumType.BECH32,
)


def test_from_metadata_exact_length():
    """An exact length becomes equal bounds."""
    signature = CategorySignature.from_metadata(EVM_FORMAT)
    assert (signature.min_len, signature.max_len) == (42, 42)
    assert signature.prefixes == ("0x",)
    assert not signature.has_hrp


def test_from_metadata_range_and_unbounded():
    """Ranges carry over; no length constraint means unbounded."""
    assert CategorySignature.from_metadata(SEGWIT_FORMAT).max_len == 74
    unbounded = CategorySignature.from_metadata(AddressMetadata(encoding=EncodingType.BASE58))
    assert (unbounded.min_len, unbounded.max_len) == (0, math.inf)


def test_from_characteristics_prefers_0x_then_known_hrp():
    """0x wins, then bc1/tb1/ltc1, then the longest prefix."""
    evm = extract_characteristics("0xd8da6bf26964af9d7eed9e03e53415d37aa96045")
    segwit = extract_characteristics("bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4")
    btc = extract_characteristics("1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa")
    assert CategorySignature.from_characteristics(evm).prefixes == ("0x",)
    assert CategorySignature.from_characteristics(segwit).prefixes == ("bc1",)
    assert CategorySignature.from_characteristics(btc).prefixes == ("1A1",)
    assert CategorySignature.from_characteristics(btc).encoding_type is EncodingType.BASE58CHECK


def test_matches_evm_address():
    """An EVM address satisfies the hex signature, other encodings do not."""
    signature = CategorySignature.from_metadata(EVM_FORMAT)
    assert signature.matches(extract_characteristics("0xd8da6bf26964af9d7eed9e03e53415d37aa96045"))
    assert not signature.matches(extract_characteristics("1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"))
    assert not signature.matches(extract_characteristics("0x" + "ab" * 21))


def test_matches_requires_hrp_prefix():
    """HRP-constrained signatures need an input HRP starting with one of them."""
    signature = CategorySignature.from_metadata(SEGWIT_FORMAT)
    assert signature.matches(extract_characteristics("bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4"))
    assert not signature.matches(extract_characteristics("a12uel5l"))


def test_matches_any_compatible_alphabet():
    """A Base58 signature accepts input whose primary alphabet is hex but which is also Base58."""
    chars = extract_characteristics("2abcdef123456789ABCDEF123456789abcdef1234111")
    assert chars.char_set is CharSet.HEX
    assert CategorySignature.from_metadata(SOLANA_FORMAT).matches(chars)
    assert not CategorySignature.from_metadata(EVM_FORMAT).matches(chars)


def test_signatures_are_hashable():
    """Signatures can key the registry's groups."""
    a = CategorySignature.from_metadata(EVM_FORMAT)
    b = CategorySignature.from_metadata(EVM_FORMAT)
    assert {a: 1}[b] == 1
