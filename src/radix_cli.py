#!/usr/bin/env python3
#-*- coding: utf-8 -*-
#
# Radix Codec: Arbitrary-Base Numeral Conversion
# Copyright (C) 2025 Peter J. Marko
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# Filename: src/radix_cli.py

"""
Command-line front end for the radix converter.

Prints the converted value to standard output so shell scripts can capture
it. Errors go to standard error and the exit code is 1.

Commands:
-   `encode` / `decode`: base-10 numeral <-> symbols.
-   `encode-hex` / `decode-hex`: hexadecimal <-> symbols.
-   `encode-bytes` / `decode-bytes`: bytes (given and printed as hex) <->
    symbols, keeping leading zero bytes.
-   `convert`: re-express a numeral in another base (`--from`, `--to`).
-   `alphabets`: list the named alphabets.

The alphabet is chosen by `--alphabet NAME` or `--symbols STRING`. Without
either, the `RADIX_CODEC_ALPHABET` environment variable is used, then
`[Codec] default_alphabet` from config.ini, then `base62`.

Examples:
    radix-codec encode 34441886726
    radix-codec --alphabet base58 encode-hex 636363
    radix-codec convert -12 --from 10 --to 16
"""

import argparse
import logging
import os
import sys

from colorama import Fore, init

from alphabets import ALPHABETS, get_alphabet
from codec_errors import CodecError
from config_loader import APP_CONFIG, get_config_value
from radix_converter import Converter

ALPHABET_ENV = "RADIX_CODEC_ALPHABET"

COMMANDS = ['encode', 'decode', 'encode-hex', 'decode-hex',
            'encode-bytes', 'decode-bytes', 'convert', 'alphabets']


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radix-codec",
        description="Convert numbers, hex strings and bytes to and from an arbitrary-base alphabet."
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--alphabet", type=str, help="Named alphabet (see the 'alphabets' command).")
    group.add_argument("--symbols", type=str, help="Literal alphabet; its length sets the base.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("command", choices=COMMANDS, help="The conversion to perform.")
    parser.add_argument("value", nargs="?", default=None, help="The value to convert.")
    parser.add_argument("--from", dest="from_radix", type=int, default=10,
                        help="Source base for 'convert' (default: 10).")
    parser.add_argument("--to", dest="to_radix", type=int, default=16,
                        help="Target base for 'convert' (default: 16).")
    return parser


def setup_logging(verbose: bool):
    level_name = get_config_value(APP_CONFIG, 'Logging', 'level', fallback='WARNING')
    level = logging.DEBUG if verbose else getattr(logging, str(level_name).upper(), logging.WARNING)
    logging.basicConfig(level=level, format='%(levelname)s (%(name)s): %(message)s')


def resolve_alphabet(args) -> str:
    """Picks the alphabet from the arguments, environment or config.ini."""
    if args.symbols:
        return args.symbols
    name = (args.alphabet
            or os.getenv(ALPHABET_ENV)
            or get_config_value(APP_CONFIG, 'Codec', 'default_alphabet', fallback='base62'))
    logging.debug(f"Using alphabet '{name}'.")
    return get_alphabet(name)


def run_command(args) -> str:
    """Runs one conversion and returns the text to print."""
    if args.command == 'alphabets':
        width = max(len(name) for name in ALPHABETS)
        return "\n".join(f"{name:<{width}}  {len(symbols):>2}  {symbols}"
                         for name, symbols in ALPHABETS.items())

    if args.value is None:
        raise CodecError(f"The '{args.command}' command requires a value.")

    symbols = resolve_alphabet(args)
    converter = Converter(symbols, len(symbols))

    if args.command == 'encode':
        return converter.encode(args.value)
    if args.command == 'decode':
        return converter.decode(args.value)
    if args.command == 'encode-hex':
        return converter.encode_hex(args.value)
    if args.command == 'decode-hex':
        return converter.decode_hex(args.value)
    if args.command == 'encode-bytes':
        try:
            data = bytes.fromhex(args.value)
        except ValueError as e:
            raise CodecError(f"Invalid byte string '{args.value}': {e}") from e
        return converter.encode_bytes(data)
    if args.command == 'decode-bytes':
        return converter.decode_bytes(args.value).hex()
    return converter.convert_base(args.value, args.from_radix, args.to_radix)


def main(argv=None) -> int:
    """Parses arguments, performs the conversion and prints the result."""
    init(autoreset=True)
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        print(run_command(args))
    except CodecError as e:
        print(f"{Fore.RED}ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

# === End of src/radix_cli.py ===
