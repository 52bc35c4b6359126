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
# Filename: src/alphabets.py

"""
Named alphabets for the radix converter.

These strings are part of the interchange format: data encoded by other
implementations uses exactly these symbol orders, so they must not change.

Usage:
    from alphabets import ALPHABET_BASE58, get_alphabet

    symbols = get_alphabet('base58')
"""

from codec_errors import InvalidConfiguration

ALPHABET_BASE62_DEFAULT = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
ALPHABET_BASE62_INVERTED = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET_BASE2 = "01"
ALPHABET_BASE8 = "01234567"
ALPHABET_BASE11 = "0123456789a"
ALPHABET_BASE16 = "0123456789abcdef"
# Crockford ordering (no I, L, O, U)
ALPHABET_BASE32 = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
ALPHABET_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"
# Bitcoin alphabet (avoids 0, O, I, l)
ALPHABET_BASE58 = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
ALPHABET_BASE64 = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
ALPHABET_BASE67 = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_.!~"

BASE_DEFAULT = 62

ALPHABETS = {
    'base62': ALPHABET_BASE62_DEFAULT,
    'base62-inverted': ALPHABET_BASE62_INVERTED,
    'base2': ALPHABET_BASE2,
    'base8': ALPHABET_BASE8,
    'base11': ALPHABET_BASE11,
    'base16': ALPHABET_BASE16,
    'base32': ALPHABET_BASE32,
    'base36': ALPHABET_BASE36,
    'base58': ALPHABET_BASE58,
    'base64': ALPHABET_BASE64,
    'base67': ALPHABET_BASE67,
}


def get_alphabet(name: str) -> str:
    """Returns the symbols of a named alphabet (case-insensitive)."""
    key = str(name).strip().lower()
    if key not in ALPHABETS:
        known = ", ".join(ALPHABETS)
        raise InvalidConfiguration(f"Unknown alphabet '{name}'. Known alphabets: {known}")
    return ALPHABETS[key]

# === End of src/alphabets.py ===
