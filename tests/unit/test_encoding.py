"""Unit tests for the hex, Base58, Bech32/Bech32m and SS58 codecs."""

import bech32 as bech32_lib
import pytest

from chain_identifier.core.exceptions import ChecksumError, EncodingError
from chain_identifier.core.types import EncodingType
from chain_identifier.encoding import base58, bech32, hex, ss58
from chain_identifier.encoding.bech32 import Bech32Variant
from chain_identifier.encoding.raw import decode_raw

ALICE_ACCOUNT = bytes.fromhex("d43593c715fdd31c61141abd04a99fd6822c8558854ccde39a5684e7a56da27d")
ALICE_SUBSTRATE = "5GrwvaEF5zXb26Fz9rcQpDWS57CtERHpNehXCPcNoHGKutQY"
ALICE_POLKADOT = "15oF4uVJwmo4TdGW7VfQxNLavjCXviqxT9S1MgbjMNHr6Sp5"
# valid hex (22 bytes) and valid Base58 (32 bytes)
HEX_OR_BASE58 = "2abcdef123456789ABCDEF123456789abcdef1234111"


def test_hex_accepts_prefixed_and_bare():
    """Both 0x-prefixed and bare even-length hex decode."""
    assert hex.decode("0x00ff") == b"\x00\xff"
    assert hex.decode("00ff") == b"\x00\xff"


@pytest.mark.parametrize("value", ["", "0x", "0xabc", "abc", "0xzz"])
def test_hex_rejects_malformed(value):
    """Empty, odd-length and non-hex strings are rejected."""
    assert not hex.is_hex(value)
    with pytest.raises(EncodingError):
        hex.decode(value)


def test_base58_rejects_excluded_characters():
    """0, O, I and l are not part of the alphabet."""
    for bad in ("0abc", "Oabc", "Iabc", "labc"):
        assert not base58.is_base58(bad)
        with pytest.raises(EncodingError):
            base58.decode(bad)


def test_base58_leading_zero_bytes():
    """Leading zero bytes map to leading '1' characters."""
    assert base58.encode(b"\x00\x00\x01") == "112"
    assert base58.decode("112") == b"\x00\x00\x01"


@pytest.mark.parametrize(
    "value, variant",
    [
        ("a12uel5l", Bech32Variant.BECH32),
        ("A12UEL5L", Bech32Variant.BECH32),
        ("a1lqfn3a", Bech32Variant.BECH32M),
        ("bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4", Bech32Variant.BECH32),
    ],
)
def test_bech32_decode_reports_variant(value, variant):
    """Decoding identifies which checksum constant matched."""
    assert bech32.decode(value).variant is variant


@pytest.mark.parametrize(
    "value",
    [
        "A12uEL5L",  # mixed case
        "a12uel5m",  # bad checksum
        "12uel5l",  # empty hrp
        "a1b2uel5l",  # 'b' outside the charset
        "a" * 85 + "1qqqqqq",  # too long
    ],
)
def test_bech32_decode_rejects_invalid(value):
    """Structural and checksum failures raise EncodingError."""
    with pytest.raises(EncodingError):
        bech32.decode(value)


def test_bech32_encode_matches_reference_library():
    """Our Bech32 encoder agrees with the bech32 package."""
    payload = bytes(range(20))
    expected = bech32_lib.bech32_encode("cosmos", bech32_lib.convertbits(payload, 8, 5))
    assert bech32.encode_bytes("cosmos", payload) == expected


def test_bech32m_encode_decodes_as_bech32m():
    """Bech32m output carries the Bech32m constant, not the Bech32 one."""
    encoded = bech32.encode_bytes("bc", bytes(32), Bech32Variant.BECH32M)
    hrp, payload, variant = bech32.decode_to_bytes(encoded)
    assert (hrp, payload, variant) == ("bc", bytes(32), Bech32Variant.BECH32M)
    assert bech32_lib.bech32_decode(encoded) == (None, None)


def test_convert_bits_strict_slack():
    """Non-zero padding bits are rejected when converting back to bytes."""
    assert bech32.convert_bits([0, 0], 5, 8, pad=False) == [0]
    with pytest.raises(EncodingError):
        bech32.convert_bits([31, 31], 5, 8, pad=False)


def test_extract_hrp_ignores_checksum():
    """HRP extraction only needs a Bech32-shaped string."""
    assert bech32.extract_hrp("cosmos1qqqqqqqqqq") == "cosmos"
    assert bech32.extract_hrp("COSMOS1QQQQQQ") == "cosmos"
    assert bech32.extract_hrp("nohrphere") is None


@pytest.mark.parametrize("value, shaped", [
    ("bc1qqqqqqq", True),
    ("a1qqqqq", False),
    ("Cosmos1qqqqqq", False),
    ("cosmos1qqqqqb", False),
])
def test_is_bech32_shaped(value, shaped):
    """Shape needs a single case, a separator and six charset characters."""
    assert bech32.is_bech32_shaped(value) is shaped


def test_ss58_decodes_known_substrate_address():
    """The well-known development account decodes under prefix 42."""
    decoded = ss58.decode(ALICE_SUBSTRATE)
    assert decoded.prefix == 42
    assert decoded.account_id == ALICE_ACCOUNT
    assert decoded.network == "substrate"


@pytest.mark.parametrize("prefix, expected", [(42, ALICE_SUBSTRATE), (0, ALICE_POLKADOT)])
def test_ss58_encodes_known_addresses(prefix, expected):
    """Encoding reproduces the published addresses."""
    assert ss58.encode(prefix, ALICE_ACCOUNT) == expected


def test_ss58_two_byte_prefix():
    """Prefixes from 64 upward use the two-byte form."""
    assert ss58.encode_prefix(100) == bytes([0x40, 100])
    encoded = ss58.encode(100, ALICE_ACCOUNT)
    decoded = ss58.decode(encoded)
    assert decoded.prefix == 100
    assert decoded.network == "generic"


def test_ss58_rejects_reserved_prefix_byte():
    """A first byte of 128 or more is not a valid prefix."""
    forged = base58.encode(bytes([0x80]) + ALICE_ACCOUNT + b"\x00\x00")
    with pytest.raises(EncodingError):
        ss58.decode(forged)


def test_ss58_rejects_corrupted_checksum():
    """Changing a single character breaks the checksum."""
    corrupted = ALICE_SUBSTRATE[:-1] + ("Z" if ALICE_SUBSTRATE[-1] != "Z" else "Y")
    with pytest.raises((ChecksumError, EncodingError)):
        ss58.decode(corrupted)


@pytest.mark.parametrize("bit", range(33 * 8))
def test_ss58_detects_any_single_bit_flip(bit):
    """Flipping any bit of prefix or account id under the old checksum fails to decode."""
    data = bytearray(base58.decode(ALICE_SUBSTRATE))
    assert len(data) == 35
    data[bit // 8] ^= 1 << (bit % 8)
    with pytest.raises((ChecksumError, EncodingError)):
        ss58.decode(base58.encode(bytes(data)))


def test_ss58_rejects_prefix_out_of_range():
    """Prefixes above 16383 cannot be encoded."""
    with pytest.raises(EncodingError):
        ss58.encode(16384, ALICE_ACCOUNT)


def test_decode_raw_depends_on_the_encoding():
    """A string valid as both hex and Base58 decodes to different bytes under each."""
    assert len(decode_raw(HEX_OR_BASE58, EncodingType.HEX)) == 22
    assert len(decode_raw(HEX_OR_BASE58, EncodingType.BASE58)) == 32
    with pytest.raises(EncodingError):
        decode_raw("0x00ff", EncodingType.BASE58)
    assert decode_raw(ALICE_SUBSTRATE, EncodingType.SS58)[1:33] == ALICE_ACCOUNT
