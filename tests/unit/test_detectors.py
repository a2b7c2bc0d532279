"""Unit tests for the address and public key detectors."""

import pytest

from chain_identifier.core.exceptions import DerivationError
from chain_identifier.core.types import EncodingType, InputType
from chain_identifier.detectors.address import detect_address, normalize_address
from chain_identifier.detectors.public_key import detect_public_key
from chain_identifier.encoding import bech32
from chain_identifier.encoding.bech32 import Bech32Variant
from chain_identifier.input.characteristics import extract_characteristics
from chain_identifier.input.classifier import classify_input
from chain_identifier.input.matcher import match_input_with_metadata

EVM_LOWER = "0xd8da6bf26964af9d7eed9e03e53415d37aa96045"
EVM_CHECKSUMMED = "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045"
BTC_ADDRESS = "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"
COMPRESSED_KEY = "0x0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
HEX_OR_BASE58 = "2abcdef123456789ABCDEF123456789abcdef1234111"


def _detect(registry, chain_id, value, index=0):
    """Helper: run the address detector against one chain format."""
    fmt = registry.get_chain(chain_id).address_formats[index]
    return detect_address(value, extract_characteristics(value), fmt, chain_id)


def _key_match(registry, value, chain_id):
    """Helper: the public key match for one chain."""
    chars = extract_characteristics(value)
    matches = match_input_with_metadata(value, chars, classify_input(value, chars), registry)
    return chars, next(m for m in matches if m.chain_id == chain_id and not m.is_address)


def test_lowercase_evm_is_accepted_without_checksum_bonus(registry):
    """Uniform-case hex is not checksummed but still a candidate."""
    candidate = _detect(registry, "ethereum", EVM_LOWER)
    assert candidate.confidence == pytest.approx(0.55)
    assert candidate.normalized == EVM_CHECKSUMMED
    assert "no checksum casing" in candidate.reasoning


def test_checksummed_evm_scores_higher(registry):
    """Valid EIP-55 casing earns the checksum bonus."""
    candidate = _detect(registry, "ethereum", EVM_CHECKSUMMED)
    assert candidate.confidence == pytest.approx(0.85)
    assert candidate.reasoning.startswith("Hex address, valid checksum")


def test_wrong_evm_casing_is_rejected(registry):
    """Mixed case that does not match the checksum is discarded."""
    wrong = "0xD8dA6BF26964aF9D7eEd9e03E53415D37aA96045"
    assert _detect(registry, "ethereum", wrong) is None


def test_bitcoin_p2pkh_confidence(registry):
    """Checksum plus version byte on a ranged length."""
    candidate = _detect(registry, "bitcoin", BTC_ADDRESS)
    assert candidate.input_type is InputType.ADDRESS
    assert candidate.encoding is EncodingType.BASE58CHECK
    assert candidate.normalized == BTC_ADDRESS
    assert candidate.confidence == pytest.approx(0.9)
    assert candidate.reasoning == "Base58Check address, valid checksum, valid version bytes"


def test_wrong_version_byte_is_rejected(registry):
    """A Bitcoin address is not a Litecoin address."""
    assert _detect(registry, "litecoin", BTC_ADDRESS) is None


def test_bech32_variant_mismatch_is_rejected(registry):
    """A Bech32m string fails a Bech32 format and vice versa."""
    taproot = bech32.encode_bytes("bc", bytes(32), Bech32Variant.BECH32M)
    segwit_index, taproot_index = 2, 3
    assert _detect(registry, "bitcoin", taproot, segwit_index) is None
    assert _detect(registry, "bitcoin", taproot, taproot_index).encoding is EncodingType.BECH32M


def test_bech32_is_normalized_to_lowercase(registry):
    """Uppercase Bech32 input is reported in lowercase."""
    address = "BC1QW508D6QEJXTDG4Y5R3ZARVARY0C5XW7KV8F3T4"
    candidate = _detect(registry, "bitcoin", address, 2)
    assert candidate.normalized == address.lower()
    assert candidate.confidence == pytest.approx(0.9)


def test_normalize_address_keeps_base58():
    """Base58-family strings are case-sensitive and left untouched."""
    assert normalize_address(BTC_ADDRESS, EncodingType.BASE58CHECK) == BTC_ADDRESS


def test_public_key_derivation_round_trips(registry):
    """A compressed key derives a Tron address that validates as Tron."""
    chars, match = _key_match(registry, COMPRESSED_KEY, "tron")
    candidate = detect_public_key(COMPRESSED_KEY, chars, match, registry)
    assert candidate.input_type is InputType.PUBLIC_KEY
    assert candidate.normalized.startswith("T")
    assert candidate.confidence == pytest.approx(0.8)
    assert "tron pipeline" in candidate.reasoning


def test_stake_key_chains_are_skipped(registry):
    """Cardano needs a stake key and yields no single-key candidate."""
    value = "0x" + "11" * 32
    chars, match = _key_match(registry, value, "cardano")
    assert detect_public_key(value, chars, match, registry) is None


def test_key_length_outside_format_raises(registry):
    """A key rejected by the chain's format is a per-candidate failure."""
    value = "0x" + "11" * 32
    chars, match = _key_match(registry, value, "polkadot")
    chars = extract_characteristics("0x" + "11" * 33)
    with pytest.raises(DerivationError):
        detect_public_key("0x" + "11" * 33, chars, match, registry)


def test_base58_key_matches_only_base58_key_formats(registry):
    """Key formats are matched by curve, alphabet and length."""
    chars = extract_characteristics(HEX_OR_BASE58)
    matches = match_input_with_metadata(HEX_OR_BASE58, chars, classify_input(HEX_OR_BASE58, chars), registry)
    keys = {m.chain_id: m for m in matches if not m.is_address}
    assert {"solana", "polkadot", "kusama", "substrate"} <= set(keys)
    # Cosmos chains only list hex keys, Ethereum wants secp256k1
    assert "cosmos_hub" not in keys
    assert "ethereum" not in keys
    assert keys["polkadot"].public_key_metadata.encoding is EncodingType.BASE58


def test_public_key_is_decoded_under_the_matched_encoding(registry):
    """The detector decodes with the key's own encoding, not the primary one."""
    chars, match = _key_match(registry, HEX_OR_BASE58, "solana")
    candidate = detect_public_key(HEX_OR_BASE58, chars, match, registry)
    assert candidate.normalized == HEX_OR_BASE58
    assert candidate.encoding is EncodingType.BASE58


def test_bare_hex_key_matches_evm_key_format(registry):
    """secp256k1 keys without 0x match EVM chains like any other secp256k1 chain."""
    derived = []
    for value in (COMPRESSED_KEY, COMPRESSED_KEY[2:]):
        chars, match = _key_match(registry, value, "ethereum")
        derived.append(detect_public_key(value, chars, match, registry).normalized)
    assert derived[0] == derived[1]
