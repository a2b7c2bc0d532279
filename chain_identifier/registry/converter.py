# chain_identifier/registry/converter.py
"""Turns on-disk chain definitions into the address/public key formats used for matching"""
from typing import Any, Callable, Dict, List

from chain_identifier.core.exceptions import MetadataError
from chain_identifier.core.types import (
    CharSet, ChecksumType, EncodingType, Network, PublicKeyType
)
from chain_identifier.registry.metadata import AddressMetadata, ChainMetadata, PublicKeyMetadata
from chain_identifier.registry.models import ChainConfig, PublicKeyFormat

BITCOIN_VERSION_BYTE = 0x00
BITCOIN_P2SH_VERSION_BYTE = 0x05
TRON_VERSION_BYTE = 0x41
BASE58CHECK_LENGTH_RANGE = (26, 35)

def _network(params: Dict[str, Any]) -> Network:
    try:
        return Network(str(params.get('network', 'mainnet')).lower())
    except ValueError as e:
        raise MetadataError(f"Unknown network: {params.get('network')}") from e

def _hrps(params: Dict[str, Any], default: str) -> tuple:
    if params.get('hrps'):
        return tuple(str(h).lower() for h in params['hrps'])
    return (str(params.get('hrp', default)).lower(),)

def _segwit_formats(hrps: tuple, network: Network) -> List[AddressMetadata]:
    """Native segwit v0 (Bech32) and taproot (Bech32m) formats"""
    return [
        AddressMetadata(
            encoding=encoding,
            char_set=CharSet.BASE32,
            length_range=(14, 74),
            hrps=hrps,
            checksum=checksum,
            network=network,
        )
        for encoding, checksum in (
            (EncodingType.BECH32, ChecksumType.BECH32),
            (EncodingType.BECH32M, ChecksumType.BECH32M),
        )
    ]

def _evm(params: Dict[str, Any]) -> List[AddressMetadata]:
    return [AddressMetadata(
        encoding=EncodingType.HEX,
        char_set=CharSet.HEX,
        exact_length=42,
        prefixes=("0x",),
        checksum=ChecksumType.EIP55,
        network=_network(params),
    )]

def _bitcoin_p2pkh(params: Dict[str, Any]) -> List[AddressMetadata]:
    network = _network(params)
    version = int(params.get('version_byte', BITCOIN_VERSION_BYTE))
    formats = [AddressMetadata(
        encoding=EncodingType.BASE58CHECK,
        char_set=CharSet.BASE58,
        length_range=BASE58CHECK_LENGTH_RANGE,
        version_bytes=(version,),
        checksum=ChecksumType.BASE58CHECK,
        network=network,
    )]

    p2sh_version = params.get('p2sh_version_byte')
    if p2sh_version is None and version == BITCOIN_VERSION_BYTE:
        p2sh_version = BITCOIN_P2SH_VERSION_BYTE
    if p2sh_version is not None:
        formats.append(AddressMetadata(
            encoding=EncodingType.BASE58CHECK,
            char_set=CharSet.BASE58,
            length_range=BASE58CHECK_LENGTH_RANGE,
            version_bytes=(int(p2sh_version),),
            checksum=ChecksumType.BASE58CHECK,
            network=network,
        ))

    if params.get('hrp') or params.get('hrps') or version == BITCOIN_VERSION_BYTE:
        formats.extend(_segwit_formats(_hrps(params, "bc"), network))
    return formats

def _bitcoin_bech32(params: Dict[str, Any]) -> List[AddressMetadata]:
    return _segwit_formats(_hrps(params, "bc"), _network(params))

def _cosmos(params: Dict[str, Any]) -> List[AddressMetadata]:
    return [AddressMetadata(
        encoding=EncodingType.BECH32,
        char_set=CharSet.BASE32,
        length_range=(20, 90),
        hrps=_hrps(params, "cosmos"),
        checksum=ChecksumType.BECH32,
        network=_network(params),
    )]

def _cardano(params: Dict[str, Any]) -> List[AddressMetadata]:
    return [AddressMetadata(
        encoding=EncodingType.BECH32,
        char_set=CharSet.BASE32,
        length_range=(50, 90),
        hrps=_hrps(params, "addr"),
        checksum=ChecksumType.BECH32,
        network=_network(params),
    )]

def _solana(params: Dict[str, Any]) -> List[AddressMetadata]:
    return [AddressMetadata(
        encoding=EncodingType.BASE58,
        char_set=CharSet.BASE58,
        length_range=(32, 44),
        network=_network(params),
    )]

def _ss58(params: Dict[str, Any]) -> List[AddressMetadata]:
    strict = params.get('strict_prefix', True)
    return [AddressMetadata(
        encoding=EncodingType.SS58,
        char_set=CharSet.BASE58,
        length_range=(35, 48),
        version_bytes=(int(params.get('prefix', 0)),) if strict else (),
        checksum=ChecksumType.SS58,
        network=_network(params),
    )]

def _tron(params: Dict[str, Any]) -> List[AddressMetadata]:
    return [AddressMetadata(
        encoding=EncodingType.BASE58CHECK,
        char_set=CharSet.BASE58,
        exact_length=34,
        version_bytes=(TRON_VERSION_BYTE,),
        checksum=ChecksumType.BASE58CHECK,
        network=_network(params),
    )]

ADDRESS_FORMAT_BUILDERS: Dict[str, Callable[[Dict[str, Any]], List[AddressMetadata]]] = {
    'evm': _evm,
    'bitcoin_p2pkh': _bitcoin_p2pkh,
    'bitcoin_bech32': _bitcoin_bech32,
    'cosmos': _cosmos,
    'cardano': _cardano,
    'solana': _solana,
    'ss58': _ss58,
    'tron': _tron,
}

def _public_key_format(fmt: PublicKeyFormat, key_type: PublicKeyType, chain_id: str) -> PublicKeyMetadata:
    try:
        encoding = EncodingType.from_name(fmt.encoding)
    except ValueError as e:
        raise MetadataError(f"Chain '{chain_id}': unknown public key encoding '{fmt.encoding}'") from e

    return PublicKeyMetadata(
        encoding=encoding,
        key_type=key_type,
        char_set=encoding.char_set,
        exact_length=fmt.exact_length,
        length_range=fmt.length_range,
        prefixes=fmt.prefixes,
        hrps=fmt.hrps,
    )

def convert_chain_config(config: ChainConfig) -> ChainMetadata:
    """Build the matching metadata for one chain definition"""
    builder = ADDRESS_FORMAT_BUILDERS.get(config.address_pipeline)
    if builder is None:
        raise MetadataError(
            f"Chain '{config.id}': unknown address pipeline '{config.address_pipeline}'"
        )

    try:
        key_type = PublicKeyType(config.curve.lower())
    except ValueError as e:
        raise MetadataError(f"Chain '{config.id}': unknown curve '{config.curve}'") from e

    try:
        address_formats = builder(config.address_params)
    except (TypeError, ValueError) as e:
        raise MetadataError(f"Chain '{config.id}': invalid address_params: {e}") from e

    return ChainMetadata(
        id=config.id,
        name=config.name,
        address_formats=tuple(address_formats),
        public_key_formats=tuple(
            _public_key_format(fmt, key_type, config.id) for fmt in config.public_key_formats
        ),
    )
