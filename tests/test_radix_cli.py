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
# Filename: tests/test_radix_cli.py

"""
Unit tests for src/radix_cli.py.
"""
from configparser import ConfigParser

import pytest

import radix_cli


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Runs every test against an empty config and no alphabet env var."""
    monkeypatch.setattr(radix_cli, "APP_CONFIG", ConfigParser())
    monkeypatch.delenv(radix_cli.ALPHABET_ENV, raising=False)


@pytest.mark.parametrize("argv, expected", [
    (["encode", "34441886726"], "base62"),
    (["decode", "base62"], "34441886726"),
    (["encode-hex", "63d91de18f092ab964484b9e"], "eBhQNIyMqR6WH3XS"),
    (["decode-hex", "eBhQNIyMqR6WH3XS"], "63d91de18f092ab964484b9e"),
    (["encode-bytes", "0001"], "011"),
    (["decode-bytes", "0z01"], "00" * 62),
    (["convert", "-12", "--from", "10", "--to", "16"], "-c"),
    (["--alphabet", "base58", "encode-hex", "636363"], "aPEr"),
    (["--symbols", "01", "encode-hex", "f"], "1111"),
])
def test_commands_print_result(capsys, argv, expected):
    assert radix_cli.main(argv) == 0
    assert capsys.readouterr().out.strip() == expected


def test_decode_very_long_value(capsys):
    assert radix_cli.main(["decode", "z" * 3000]) == 0
    out = capsys.readouterr().out.strip()
    assert len(out) == 5378
    assert out.isdigit()


def test_alphabet_from_environment(capsys, monkeypatch):
    monkeypatch.setenv(radix_cli.ALPHABET_ENV, "base2")
    assert radix_cli.main(["encode", "15"]) == 0
    assert capsys.readouterr().out.strip() == "1111"


def test_alphabet_from_config(capsys, monkeypatch):
    config = ConfigParser()
    config.read_string("[Codec]\ndefault_alphabet = base16\n")
    monkeypatch.setattr(radix_cli, "APP_CONFIG", config)

    assert radix_cli.main(["encode", "255"]) == 0
    assert capsys.readouterr().out.strip() == "ff"


def test_alphabets_command_lists_names(capsys):
    assert radix_cli.main(["alphabets"]) == 0
    out = capsys.readouterr().out
    assert "base58" in out
    assert "base62-inverted" in out


@pytest.mark.parametrize("argv, message", [
    (["decode", "ab!"], 'Invalid Character: "!"'),
    (["encode", "12x"], "Invalid Value"),
    (["encode-hex", " "], "hex is Empty"),
    (["encode-bytes", "zz"], "Invalid byte string"),
    (["--alphabet", "base99", "encode", "1"], "Unknown alphabet"),
    (["encode"], "requires a value"),
])
def test_errors_exit_with_status_one(capsys, argv, message):
    assert radix_cli.main(argv) == 1
    captured = capsys.readouterr()
    assert "ERROR" in captured.err
    assert message in captured.err
    assert captured.out == ""


def test_unknown_command_is_rejected_by_argparse():
    with pytest.raises(SystemExit):
        radix_cli.main(["shuffle", "1"])

# === End of tests/test_radix_cli.py ===
