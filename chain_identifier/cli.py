"""
chain-identifier command line entry point
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from chain_identifier import __version__
from chain_identifier.core.config import load_config
from chain_identifier.core.exceptions import ChainIdentifierError, InvalidInputError
from chain_identifier.identify import identify
from chain_identifier.registry.loader import MetadataLoader
from chain_identifier.registry.registry import Registry
from chain_identifier.registry.validation import validate_metadata
from chain_identifier.utils.logging import setup_logging

logger = logging.getLogger("chain_identifier.cli")

def _print_candidates(candidates, as_json: bool) -> None:
    if as_json:
        print(json.dumps([c.to_dict() for c in candidates], indent=2))
        return

    print(f"{'CHAIN':<16} {'TYPE':<11} {'ENCODING':<12} {'CONF':>5}  NORMALIZED")
    for c in candidates:
        print(f"{c.chain:<16} {c.input_type.value:<11} {c.encoding.label:<12} "
              f"{c.confidence:>5.2f}  {c.normalized}")
        print(f"{'':<16} {c.reasoning}")

def _cmd_identify(args, registry: Registry) -> int:
    try:
        candidates = identify(args.input, registry)
    except InvalidInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    _print_candidates(candidates, args.json)
    return 0

def _cmd_chains(args, registry: Registry) -> int:
    for chain in registry.chains:
        config = registry.get_chain_config(chain.id)
        formats = ", ".join(f.encoding.label for f in chain.address_formats)
        print(f"{chain.id:<16} {config.curve:<10} {config.address_pipeline:<14} {formats}")
    return 0

def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point"""
    parser = argparse.ArgumentParser(description='Identify blockchain addresses and public keys')
    parser.add_argument('--config', help='Path to YAML configuration file')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Log level (overrides configuration)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    identify_parser = subparsers.add_parser('identify', help='Identify an address or public key')
    identify_parser.add_argument('input', help='Address or public key string')
    identify_parser.add_argument('--json', action='store_true', help='Print candidates as JSON')

    subparsers.add_parser('chains', help='List loaded chains')
    subparsers.add_parser('check-metadata', help='Validate chain, curve and pipeline definitions')

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
    except ChainIdentifierError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    setup_logging(args.log_level or config.logging.level, config.logging.format, config.logging.file)
    loader = MetadataLoader(config.metadata_dir)

    if args.command == 'check-metadata':
        problems = validate_metadata(loader)
        for problem in problems:
            print(problem)
        if not problems:
            print("Metadata OK")
        return 1 if problems else 0

    try:
        registry = Registry.build(loader)
    except ChainIdentifierError as e:
        logger.error("Failed to load chain metadata: %s", e)
        return 2

    if args.command == 'identify':
        return _cmd_identify(args, registry)
    return _cmd_chains(args, registry)

if __name__ == '__main__':
    sys.exit(main())
