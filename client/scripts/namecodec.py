#!/usr/bin/env python3
"""
Stark Name Codec Command Line

Encodes labels and domains to field elements and decodes them back, and
prints the naming contract address for a network.

Examples:
    namecodec.py encode fricoben
    namecodec.py decode 0x15d246f6c1b
    namecodec.py encode-domain sub.fricoben.stark
    namecodec.py decode-domain 1499554868251
    namecodec.py contract --network sepolia
"""

import argparse
import json
import os
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from starkname.decoder import decode
from starkname.domain import decode_domain, encode_domain
from starkname.encoder import encode
from starkname.errors import NamingError
from starkname.felt import fits_in_field, parse_felt, to_hex
from starkname.network import naming_contract


def run_encode(args) -> dict:
    value = encode(args.label)
    if not fits_in_field(value):
        print(f"[!] Warning: '{args.label}' does not fit one field element")
    return {'label': args.label, 'value': value, 'hex': to_hex(value)}


def run_decode(args) -> dict:
    value = parse_felt(args.value)
    return {'value': value, 'label': decode(value)}


def run_encode_domain(args) -> dict:
    values = encode_domain(args.domain)
    return {'domain': args.domain, 'values': values, 'hex': [to_hex(v) for v in values]}


def run_decode_domain(args) -> dict:
    values = [parse_felt(v) for v in args.values]
    return {'values': values, 'domain': decode_domain(values)}


def run_contract(args) -> dict:
    if args.contract:
        address = parse_felt(args.contract)
        source = 'override'
    else:
        address = naming_contract(network=args.network)
        source = args.network
    return {'network': args.network, 'source': source, 'contract': to_hex(address)}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Encode and decode Stark domain labels'
    )
    parser.add_argument(
        '--json', '-j',
        action='store_true',
        help='Print the result as JSON'
    )
    commands = parser.add_subparsers(dest='command', required=True)

    p = commands.add_parser('encode', help='Encode one label')
    p.add_argument('label', help='Label without suffix, e.g. fricoben')
    p.set_defaults(handler=run_encode)

    p = commands.add_parser('decode', help='Decode one field element')
    p.add_argument('value', help='Hex (0x...) or decimal value')
    p.set_defaults(handler=run_decode)

    p = commands.add_parser('encode-domain', help='Encode a full .stark domain')
    p.add_argument('domain', help='Domain, e.g. sub.fricoben.stark')
    p.set_defaults(handler=run_encode_domain)

    p = commands.add_parser('decode-domain', help='Decode labels into a .stark domain')
    p.add_argument('values', nargs='+', help='Encoded labels in written order')
    p.set_defaults(handler=run_decode_domain)

    p = commands.add_parser('contract', help='Show the naming contract address')
    p.add_argument(
        '--network', '-n',
        default=os.environ.get('STARKNAME_NETWORK', 'mainnet'),
        help='Network name (mainnet or sepolia)'
    )
    p.add_argument(
        '--contract', '-c',
        default=os.environ.get('STARKNAME_CONTRACT'),
        help='Explicit contract address, overrides the network table'
    )
    p.set_defaults(handler=run_contract)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        result = args.handler(args)
    except (NamingError, ValueError) as e:
        print(f"[!] {e}")
        return 1

    if args.json:
        print(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        for key, value in result.items():
            print(f"[+] {key}: {value}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
