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
# Filename: src/codec_errors.py

"""
Exception types raised by the radix converter.

Every error derives from `CodecError` and from the closest builtin exception,
so callers may catch either `CodecError` or the usual `TypeError`/`ValueError`.
"""


class CodecError(Exception):
    """Base class for all conversion errors."""


class TypeMismatch(CodecError, TypeError):
    """An argument has the wrong kind (e.g. a str where bytes are expected)."""


class InvalidConfiguration(CodecError, ValueError):
    """The alphabet and radix do not form a valid pair."""


class InvalidNumeral(CodecError, ValueError):
    """A value cannot be parsed as an integer in the stated base."""


class InvalidHex(InvalidNumeral):
    """A hexadecimal input contains non-hex characters."""


class InvalidCharacter(CodecError, ValueError):
    """An encoded string contains a symbol missing from the active alphabet."""

    def __init__(self, character: str):
        self.character = character
        super().__init__(f'Invalid Character: "{character}"')


class EmptyInput(CodecError, ValueError):
    """A hexadecimal input is empty once spaces are removed."""

# === End of src/codec_errors.py ===
