#!/usr/bin/env python3
"""
oaepkit command-line tool.

Encodes, decodes and encrypts with OAEP padding. Binary inputs and outputs
are hex strings so results can be compared against published test vectors.
"""

import argparse
import logging
import os
import sys

from ..config import ConfigError, PaddingConfig
from ..crypto.hashing import supported_hash_names
from ..crypto.utils import fill_with_random, fixed_seed, parse_hex
from ..padding.oaep import (
    OAEPError,
    SCHEME_EME,
    SCHEME_OAEP,
    eme_oaep_decode,
    eme_oaep_encode,
    max_message_length,
    oaep_decode,
    oaep_encode,
)
from ..padding.rsaes import (
    load_private_key,
    load_public_key,
    rsaes_oaep_decrypt,
    rsaes_oaep_encrypt,
)


logger = logging.getLogger(__name__)


def _add_padding_options(parser: argparse.ArgumentParser, with_seed: bool = False) -> None:
    parser.add_argument('--hash', choices=supported_hash_names(), default=None,
                        help='Hash algorithm (default: from config, else sha1)')
    parser.add_argument('--mgf-hash', choices=supported_hash_names(), default=None,
                        help='MGF1 hash algorithm (default: same as --hash)')
    parser.add_argument('--label', type=str, default=None,
                        help='Label / encoding parameters as hex')
    if with_seed:
        parser.add_argument('--seed', type=str, default=None,
                            help='Fixed seed as hex (known-answer testing only)')


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(prog='oaepkit', description='OAEP padding toolkit')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to JSON configuration file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Sub-commands')
    
    encode_parser = subparsers.add_parser('encode', help='Basic OAEP encode (RFC 2437)')
    encode_parser.add_argument('message', help='Message as hex')
    encode_parser.add_argument('--length', type=int, required=True,
                               help='Intended encoded message length in bytes')
    _add_padding_options(encode_parser, with_seed=True)
    
    decode_parser = subparsers.add_parser('decode', help='Basic OAEP decode (RFC 2437)')
    decode_parser.add_argument('encoded', help='Encoded message as hex')
    _add_padding_options(decode_parser)
    
    eme_encode_parser = subparsers.add_parser('eme-encode', help='EME-OAEP encode (RFC 3447)')
    eme_encode_parser.add_argument('message', help='Message as hex')
    eme_encode_parser.add_argument('-k', '--modulus-length', type=int, required=True,
                                   help='RSA modulus length in bytes')
    _add_padding_options(eme_encode_parser, with_seed=True)
    
    eme_decode_parser = subparsers.add_parser('eme-decode', help='EME-OAEP decode (RFC 3447)')
    eme_decode_parser.add_argument('encoded', help='Encoded message as hex')
    _add_padding_options(eme_decode_parser)
    
    capacity_parser = subparsers.add_parser('capacity', help='Maximum message length')
    capacity_parser.add_argument('--length', type=int, required=True,
                                 help='Encoded length (emLen or k) in bytes')
    capacity_parser.add_argument('--scheme', choices=[SCHEME_OAEP, SCHEME_EME], default=SCHEME_EME,
                                 help='Padding scheme (default: eme)')
    capacity_parser.add_argument('--hash', choices=supported_hash_names(), default=None,
                                 help='Hash algorithm (default: from config, else sha1)')
    
    encrypt_parser = subparsers.add_parser('encrypt', help='RSAES-OAEP encrypt')
    encrypt_parser.add_argument('message', help='Message as hex')
    encrypt_parser.add_argument('--public-key', type=str, required=True,
                                help='PEM or DER public key file')
    _add_padding_options(encrypt_parser, with_seed=True)
    
    decrypt_parser = subparsers.add_parser('decrypt', help='RSAES-OAEP decrypt')
    decrypt_parser.add_argument('ciphertext', help='Ciphertext as hex')
    decrypt_parser.add_argument('--private-key', type=str, required=True,
                                help='PEM or DER private key file')
    decrypt_parser.add_argument('--password', type=str, default=None,
                                help='Private key password')
    _add_padding_options(decrypt_parser)
    
    return parser


def load_config(args: argparse.Namespace) -> PaddingConfig:
    """
    Resolve the effective configuration: file first, then command line overrides.
    
    Raises:
        ConfigError: If the configuration is invalid
    """
    if args.config:
        config = PaddingConfig.load(args.config)
    elif os.path.exists(PaddingConfig.default_path()):
        config = PaddingConfig.load()
    else:
        config = PaddingConfig()
    
    if getattr(args, 'hash', None):
        config.hash_name = args.hash
    if getattr(args, 'mgf_hash', None):
        config.mgf_hash_name = args.mgf_hash
    if getattr(args, 'label', None) is not None:
        try:
            config.label = parse_hex(args.label)
        except ValueError:
            raise ConfigError("Label must be a hex string")
    
    return config


def _seed_function(args: argparse.Namespace):
    if getattr(args, 'seed', None) is not None:
        return fixed_seed(parse_hex(args.seed))
    return fill_with_random


def _read_file(path: str) -> bytes:
    with open(path, 'rb') as f:
        return f.read()


def run_command(args: argparse.Namespace, config: PaddingConfig) -> str:
    """Execute one sub-command and return its hex or decimal output."""
    algorithm = config.hash_algorithm()
    mgf = config.mgf()
    
    if args.command == 'encode':
        return oaep_encode(parse_hex(args.message), config.label, args.length,
                           algorithm, mgf, _seed_function(args)).hex()
    
    if args.command == 'decode':
        return oaep_decode(parse_hex(args.encoded), config.label, algorithm, mgf).hex()
    
    if args.command == 'eme-encode':
        return eme_oaep_encode(parse_hex(args.message), config.label, args.modulus_length,
                               algorithm, mgf, _seed_function(args)).hex()
    
    if args.command == 'eme-decode':
        return eme_oaep_decode(parse_hex(args.encoded), config.label, None, algorithm, mgf).hex()
    
    if args.command == 'capacity':
        return str(max_message_length(args.length, algorithm, args.scheme))
    
    if args.command == 'encrypt':
        public_key = load_public_key(_read_file(args.public_key))
        return rsaes_oaep_encrypt(public_key, parse_hex(args.message), config.label,
                                  algorithm, mgf, _seed_function(args)).hex()
    
    if args.command == 'decrypt':
        password = args.password.encode() if args.password else None
        private_key = load_private_key(_read_file(args.private_key), password)
        return rsaes_oaep_decrypt(private_key, parse_hex(args.ciphertext), config.label,
                                  algorithm, mgf).hex()
    
    raise ValueError(f"Unknown command: {args.command}")


def main(argv=None) -> int:
    """Main entry point for the oaepkit command."""
    parser = create_parser()
    args = parser.parse_args(argv)
    
    if not args.command:
        parser.print_help()
        return 1
    
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )
    
    try:
        config = load_config(args)
        print(run_command(args, config))
        return 0
    except (ConfigError, OAEPError, ValueError, OSError) as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
