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
# Filename: tests/test_alphabets.py

"""
Unit tests for src/alphabets.py.
"""
import string

import pytest

from alphabets import (
    ALPHABETS,
    ALPHABET_BASE32,
    ALPHABET_BASE58,
    ALPHABET_BASE62_DEFAULT,
    ALPHABET_BASE62_INVERTED,
    ALPHABET_BASE64,
    ALPHABET_BASE67,
    BASE_DEFAULT,
    get_alphabet,
)
from codec_errors import InvalidConfiguration

# Test cases: (name, expected length)
ALPHABET_LENGTHS = [
    ("base2", 2), ("base8", 8), ("base11", 11), ("base16", 16), ("base32", 32),
    ("base36", 36), ("base58", 58), ("base62", 62), ("base62-inverted", 62),
    ("base64", 64), ("base67", 67),
]


def test_charsets():
    assert len(ALPHABET_BASE62_DEFAULT) == 62
    assert len(ALPHABET_BASE62_INVERTED) == 62
    assert BASE_DEFAULT == 62


def test_exact_contents():
    assert ALPHABET_BASE62_DEFAULT == string.digits + string.ascii_uppercase + string.ascii_lowercase
    assert ALPHABET_BASE62_INVERTED == string.digits + string.ascii_lowercase + string.ascii_uppercase
    assert ALPHABET_BASE64 == string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"
    assert ALPHABET_BASE67 == string.ascii_uppercase + string.ascii_lowercase + string.digits + "-_.!~"
    assert ALPHABET_BASE32 == "0123456789ABCDEFGHJKMNPQRSTVWXYZ"


def test_base58_avoids_ambiguous_characters():
    for ch in "0OIl":
        assert ch not in ALPHABET_BASE58


@pytest.mark.parametrize("name, length", ALPHABET_LENGTHS)
def test_named_alphabet_lengths(name, length):
    symbols = get_alphabet(name)
    assert len(symbols) == length
    assert len(set(symbols)) == length


def test_get_alphabet_is_case_insensitive():
    assert get_alphabet(" Base58 ") == ALPHABET_BASE58


def test_get_alphabet_unknown_name_raises():
    with pytest.raises(InvalidConfiguration, match="Unknown alphabet 'base99'"):
        get_alphabet("base99")


def test_registry_covers_all_names():
    assert set(ALPHABETS) == {name for name, _ in ALPHABET_LENGTHS}

# === End of tests/test_alphabets.py ===
