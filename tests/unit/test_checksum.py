"""Unit tests for EIP-55, Base58Check and SS58 checksums."""

import base58 as base58_lib
import pytest

from chain_identifier.checksum import base58check, eip55
from chain_identifier.checksum.ss58 import checksum_length, compute_checksum
from chain_identifier.core.exceptions import ChecksumError

GENESIS_ADDRESS = "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"
GENESIS_HASH160 = "62e907b15cbf27d5425399ebf6f0fb50ebb88f18"
P2SH_ADDRESS = "3J98t1WpEZ73CNmQviecrnyiWrnqRhWNLy"

EIP55_VECTORS = [
    "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
    "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359",
    "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB",
    "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb",
    "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045",
]


def _flip_case(address, index):
    """Helper: invert the case of the hex letter at position index (after 0x)."""
    digits = list(address[2:])
    digits[index] = digits[index].swapcase()
    return "0x" + "".join(digits)


@pytest.mark.parametrize("expected", EIP55_VECTORS)
def test_eip55_checksums_lowercase_address(expected):
    """Checksumming the lowercase form yields the published casing."""
    assert eip55.to_checksum_address(expected.lower()) == expected
    assert eip55.validate(expected)


@pytest.mark.parametrize("expected", EIP55_VECTORS)
def test_eip55_normalize_is_idempotent(expected):
    """Normalizing an already checksummed address changes nothing."""
    assert eip55.normalize(eip55.normalize(expected.lower())) == expected


def test_eip55_single_case_flip_fails():
    """Flipping the case of one letter invalidates the checksum."""
    address = EIP55_VECTORS[0]
    letter = next(i for i, c in enumerate(address[2:]) if c.isalpha())
    assert not eip55.validate(_flip_case(address, letter))


def test_eip55_uniform_case_is_not_checksummed():
    """All-lowercase and all-uppercase addresses carry no checksum."""
    lower = EIP55_VECTORS[0].lower()
    upper = "0x" + EIP55_VECTORS[0][2:].upper()
    assert not eip55.is_checksummed(lower)
    assert not eip55.is_checksummed(upper)
    assert not eip55.validate(lower)


@pytest.mark.parametrize("bad", ["0x1234", "5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed", "0x" + "g" * 40])
def test_eip55_rejects_malformed_addresses(bad):
    """Wrong length, missing prefix or non-hex digits raise ChecksumError."""
    with pytest.raises(ChecksumError):
        eip55.to_checksum_address(bad)


def test_base58check_genesis_address():
    """The genesis coinbase address decodes to version 0 and its hash160."""
    version, payload = base58check.validate(GENESIS_ADDRESS)
    assert version == 0
    assert payload.hex() == GENESIS_HASH160


def test_base58check_p2sh_version():
    """P2SH addresses carry version byte 5."""
    version, _ = base58check.validate(P2SH_ADDRESS)
    assert version == 5


def test_base58check_encode_matches_reference_library():
    """Our encoder agrees with base58.b58encode_check."""
    payload = bytes.fromhex(GENESIS_HASH160)
    assert base58check.encode(0, payload) == GENESIS_ADDRESS
    assert base58check.encode(0x41, payload) == base58_lib.b58encode_check(b"\x41" + payload).decode()


def test_base58check_rejects_corruption():
    """A single changed character fails the checksum."""
    corrupted = GENESIS_ADDRESS[:-1] + "b"
    assert base58check.validate(corrupted) is None


@pytest.mark.parametrize("bit", range(21 * 8))
def test_base58check_detects_any_single_bit_flip(bit):
    """Flipping any bit of version or payload under the old checksum fails validation."""
    data = bytearray(base58_lib.b58decode(GENESIS_ADDRESS))
    assert len(data) == 25
    data[bit // 8] ^= 1 << (bit % 8)
    assert base58check.validate(base58_lib.b58encode(bytes(data)).decode()) is None


def test_base58check_requires_25_bytes():
    """Checksum-valid payloads of other sizes are not Base58Check addresses."""
    short = base58_lib.b58encode_check(b"\x00" + bytes(19)).decode()
    assert base58check.validate(short) is None
    assert base58check.validate("0OIl") is None


@pytest.mark.parametrize("length, expected", [(35, 2), (36, 2), (10, 1), (63, 1), (64, 2), (16384, 3)])
def test_ss58_checksum_length(length, expected):
    """Checksum size follows the decoded payload length."""
    assert checksum_length(length) == expected


def test_ss58_checksum_is_prefix_of_blake2b():
    """Shorter checksums are prefixes of longer ones."""
    account = bytes(32)
    assert compute_checksum(b"\x2a", account, 3)[:2] == compute_checksum(b"\x2a", account, 2)
