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
# Filename: src/radix_converter.py

"""
Arbitrary-base numeral conversion over a configurable alphabet.

A `Converter` holds one (alphabet, radix) pair and converts between three
representations: non-negative integers, byte sequences, and symbol strings.
All arithmetic is done on Python's unbounded `int`, so there is no size limit.

Conversion pairs:
-   `encode` / `decode`: base-10 numeral string <-> symbol string.
-   `encode_bytes` / `decode_bytes`: bytes <-> symbol string. Leading zero
    bytes, which a plain integer cannot represent, are written as two-symbol
    markers in front of the payload.
-   `encode_hex` / `decode_hex`: hexadecimal string <-> symbol string.
-   `convert_base`: re-expresses a signed numeral from one base (2-36) in
    another using the canonical digits `0-9a-z`. It ignores the alphabet.

Every method accepts an optional `alphabet` override for a single call. The
override must have the same length as the instance radix.

Usage:
    from radix_converter import base62, converter_for

    base62.encode('34441886726')          # 'base62'
    base58 = converter_for('base58')
    base58.encode_hex('636363')           # 'aPEr'
"""

import logging
import re

from alphabets import ALPHABET_BASE62_DEFAULT, BASE_DEFAULT, get_alphabet
from codec_errors import (
    EmptyInput,
    InvalidCharacter,
    InvalidConfiguration,
    InvalidHex,
    InvalidNumeral,
    TypeMismatch,
)

logger = logging.getLogger(__name__)

CANONICAL_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_DECIMAL_RE = re.compile(r"[0-9]+")
_HEX_RE = re.compile(r"[0-9a-fA-F]+")

# int() and str() refuse decimal strings above sys.get_int_max_str_digits()
# (4300 by default); larger numerals are split into chunks below this size.
_CHUNK_DIGITS = 1000

# Leading-zero byte markers always start with this character, whatever the
# alphabet, so encoded bytes stay compatible with existing data.
ZERO_MARKER = "0"


def _check_type(value, expected: type, label: str):
    """Raises TypeMismatch unless value is an instance of expected (bools are not ints)."""
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise TypeMismatch(
            f"Unexpected value, Expected a {label} value, but received a "
            f"{type(value).__name__} instead"
        )


def _validate_pair(alphabet, radix):
    """Checks that alphabet and radix form a usable pair."""
    _check_type(radix, int, 'int')
    _check_type(alphabet, str, 'str')
    if radix < 2:
        raise InvalidConfiguration(f"The base must be at least 2; received: {radix}")
    if len(alphabet) != radix:
        raise InvalidConfiguration(
            "The length of the alphabet and the base value must be equal; "
            f"alphabet length is: {len(alphabet)} and base is: {radix}"
        )
    if len(set(alphabet)) != len(alphabet):
        raise InvalidConfiguration(f"The alphabet contains repeated symbols: '{alphabet}'")


def _parse_numeral(digits: str, radix: int) -> int:
    """Parses a validated digit string of any length in the given base."""
    if len(digits) <= _CHUNK_DIGITS:
        return int(digits, radix)
    low_len = len(digits) // 2
    high = _parse_numeral(digits[:-low_len], radix)
    low = _parse_numeral(digits[-low_len:], radix)
    return high * radix ** low_len + low


def _format_decimal(value: int) -> str:
    """Formats a non-negative int of any size as a base-10 string."""
    if value < 10 ** _CHUNK_DIGITS:
        return str(value)
    # bit_length * 0.3 slightly underestimates the decimal digit count.
    low_len = value.bit_length() * 3 // 10 // 2
    high, low = divmod(value, 10 ** low_len)
    return _format_decimal(high) + _format_decimal(low).zfill(low_len)


class Converter:
    """
    Converts between integers, bytes and symbol strings in a given base.

    Args:
        alphabet (str): Ordered, distinct symbols; index is the digit value.
        radix (int): The numeral base. Must equal len(alphabet).
    """

    def __init__(self, alphabet: str = ALPHABET_BASE62_DEFAULT, radix: int = BASE_DEFAULT):
        _validate_pair(alphabet, radix)
        self._radix = radix
        self._alphabet = alphabet

    def __repr__(self):
        return f"Converter(alphabet={self._alphabet!r}, radix={self._radix})"

    # --- Configuration ---

    @property
    def alphabet(self) -> str:
        return self._alphabet

    @alphabet.setter
    def alphabet(self, alphabet: str):
        _validate_pair(alphabet, self._radix)
        self._alphabet = alphabet
        logger.debug(f"Alphabet changed to '{alphabet}' (base {self._radix}).")

    @property
    def radix(self) -> int:
        return self._radix

    # Read-only alias kept for callers using the "base" terminology.
    base = radix

    @property
    def base_alphabet(self) -> tuple:
        """The current (radix, alphabet) pair."""
        return self._radix, self._alphabet

    @base_alphabet.setter
    def base_alphabet(self, pair: tuple):
        radix, alphabet = pair
        self.set_base_alphabet(alphabet, radix)

    def set_alphabet(self, alphabet: str) -> str:
        """Replaces the alphabet, keeping the current radix."""
        self.alphabet = alphabet
        return self._alphabet

    def set_base_alphabet(self, alphabet: str, radix: int) -> None:
        """Replaces the radix and alphabet together; nothing changes if the pair is invalid."""
        _validate_pair(alphabet, radix)
        self._radix, self._alphabet = radix, alphabet
        logger.debug(f"Base changed to {radix} with alphabet '{alphabet}'.")

    def _resolve(self, alphabet):
        if alphabet is None:
            return self._alphabet
        _validate_pair(alphabet, self._radix)
        return alphabet

    # --- Integer engine ---

    def _int_to_symbols(self, value: int, alphabet: str) -> str:
        if value == 0:
            return alphabet[0]
        chars = []
        while value > 0:
            value, remainder = divmod(value, self._radix)
            chars.append(alphabet[remainder])
        return ''.join(reversed(chars))

    def _symbols_to_int(self, encoded: str, alphabet: str) -> int:
        lookup = {ch: i for i, ch in enumerate(alphabet)}
        value = 0
        for ch in encoded:
            digit = lookup.get(ch)
            if digit is None:
                raise InvalidCharacter(ch)
            value = value * self._radix + digit
        return value

    # --- Integer <-> string ---

    def encode(self, number, alphabet: str = None) -> str:
        """
        Encodes a non-negative base-10 numeral into a symbol string.

        Args:
            number (str | int): The numeral. Strings must contain digits only.
            alphabet (str, optional): Per-call alphabet override.

        Returns:
            str: The encoded string. Zero encodes to the first alphabet symbol.
        """
        alphabet = self._resolve(alphabet)
        if isinstance(number, int) and not isinstance(number, bool):
            if number < 0:
                raise InvalidNumeral(f"Invalid Value, expected a non-negative integer; received: {number}")
            value = number
        elif isinstance(number, str):
            if not _DECIMAL_RE.fullmatch(number):
                raise InvalidNumeral(
                    f"Invalid Value '{number}', Value must be a Number in String format"
                )
            value = _parse_numeral(number, 10)
        else:
            raise TypeMismatch(
                f"Unexpected value, Expected a str value, but received a "
                f"{type(number).__name__} instead"
            )
        return self._int_to_symbols(value, alphabet)

    def decode(self, encoded: str, alphabet: str = None) -> str:
        """Decodes a symbol string back to a base-10 numeral string."""
        _check_type(encoded, str, 'str')
        alphabet = self._resolve(alphabet)
        return _format_decimal(self._symbols_to_int(encoded, alphabet))

    # --- Bytes <-> string ---

    def encode_bytes(self, data, alphabet: str = None) -> str:
        """
        Encodes a byte sequence, preserving leading zero bytes.

        Each run of `radix - 1` leading zeros becomes the marker
        `"0" + alphabet[-1]`; a shorter remainder `r` becomes
        `"0" + alphabet[r]`. The remaining value follows as an ordinary
        encoded integer. The marker always starts with the character "0",
        even for alphabets such as base58 that do not contain it.
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeMismatch(
                f"Invalid type, value must be a bytes-like object; received {type(data).__name__}"
            )
        alphabet = self._resolve(alphabet)
        data = bytes(data)

        leading_zeros = len(data) - len(data.lstrip(b'\x00'))
        full_runs, remainder = divmod(leading_zeros, self._radix - 1)
        zero_padding = (ZERO_MARKER + alphabet[-1]) * full_runs
        if remainder:
            zero_padding += ZERO_MARKER + alphabet[remainder]

        if leading_zeros == len(data):
            return zero_padding

        payload = self._int_to_symbols(int.from_bytes(data, 'big'), alphabet)
        if payload.startswith(ZERO_MARKER) and len(payload) >= 2:
            # Only possible when "0" is a non-zero digit (base64, base67).
            logger.warning(f"Encoded payload '{payload[:8]}...' starts with the zero marker "
                           f"and will be read back as leading zero bytes.")
        return zero_padding + payload

    def decode_bytes(self, encoded: str, alphabet: str = None) -> bytes:
        """Decodes a string produced by `encode_bytes` back to the original bytes."""
        _check_type(encoded, str, 'str')
        alphabet = self._resolve(alphabet)

        leading_zeros = 0
        while encoded.startswith(ZERO_MARKER) and len(encoded) >= 2:
            leading_zeros += self._symbols_to_int(encoded[1], alphabet)
            encoded = encoded[2:]

        value = self._symbols_to_int(encoded, alphabet)
        tail = value.to_bytes((value.bit_length() + 7) // 8, 'big')
        return bytes(leading_zeros) + tail

    # --- Hex <-> string ---

    def encode_hex(self, hex_string: str, alphabet: str = None) -> str:
        """Encodes a hexadecimal string (spaces ignored)."""
        _check_type(hex_string, str, 'str')
        cleaned = hex_string.replace(' ', '')
        if not cleaned:
            raise EmptyInput("Invalid Value, hex is Empty")
        if not _HEX_RE.fullmatch(cleaned):
            raise InvalidHex(f"Invalid character in {hex_string} valid value is 0-9a-f")
        return self._int_to_symbols(int(cleaned, 16), self._resolve(alphabet))

    def decode_hex(self, encoded: str, alphabet: str = None) -> str:
        """Decodes a symbol string to lowercase hexadecimal without padding."""
        _check_type(encoded, str, 'str')
        value = self._symbols_to_int(encoded, self._resolve(alphabet))
        return format(value, 'x')

    # --- Generic base conversion ---

    def convert_base(self, value: str, from_radix: int, to_radix: int) -> str:
        """
        Re-expresses a signed numeral from one base in another.

        Uses the canonical digits 0-9a-z, not the instance alphabet.

        Args:
            value (str): The numeral, optionally prefixed with '+' or '-'.
            from_radix (int): Base of `value` (2-36).
            to_radix (int): Base of the result (2-36).

        Returns:
            str: The numeral in `to_radix`, lowercase, '-' prefixed if negative.
        """
        _check_type(value, str, 'str')
        for radix in (from_radix, to_radix):
            _check_type(radix, int, 'int')
            if not 2 <= radix <= len(CANONICAL_DIGITS):
                raise InvalidConfiguration(f"Base must be between 2 and 36; received: {radix}")

        sign, digits = '', value
        if digits[:1] in ('+', '-'):
            sign, digits = digits[0], digits[1:]
        if not digits or any(ch not in CANONICAL_DIGITS[:from_radix] for ch in digits.lower()):
            raise InvalidNumeral(f"Invalid Value '{value}' for base {from_radix}")

        number = _parse_numeral(digits, from_radix)
        if number == 0:
            return '0'

        chars = []
        while number > 0:
            number, remainder = divmod(number, to_radix)
            chars.append(CANONICAL_DIGITS[remainder])
        result = ''.join(reversed(chars))
        return '-' + result if sign == '-' else result


def converter_for(name: str) -> Converter:
    """Builds a Converter for a named alphabet, sized to its length."""
    symbols = get_alphabet(name)
    return Converter(symbols, len(symbols))


# Default instance using the standard base62 alphabet.
base62 = Converter()

# === End of src/radix_converter.py ===
