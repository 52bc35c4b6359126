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
# Filename: src/config_loader.py

"""
Configuration Loader (config_loader.py)

Loads the settings used by the command-line front end.

Key Features:
-   **Loads `config.ini`**: Parses the configuration file into a global
    `APP_CONFIG` object, found relative to the project root. The
    `RADIX_CODEC_CONFIG` environment variable may point to another file.
-   **Loads `.env`**: Loads environment variables (e.g. `RADIX_CODEC_ALPHABET`)
    from a `.env` file at the project root, if one exists.
-   **Safe Value Retrieval**: `get_config_value()` returns typed values
    (str, int, float, bool) with a fallback, stripping inline comments.

Global Objects Provided:
-   `PROJECT_ROOT`: The directory holding `pyproject.toml`, or the current
    working directory when the package is used from an installed location.
-   `APP_CONFIG`: A `configparser.ConfigParser` holding `config.ini`.
-   `ENV_LOADED`: True if a `.env` file was loaded.

Usage:
    from config_loader import APP_CONFIG, get_config_value

    alphabet_name = get_config_value(APP_CONFIG, 'Codec', 'default_alphabet',
                                     fallback='base62')
"""

import configparser
import logging
import os
import pathlib

from dotenv import load_dotenv

CONFIG_FILENAME = "config.ini"
DOTENV_FILENAME = ".env"
CONFIG_OVERRIDE_ENV = "RADIX_CODEC_CONFIG"

logger = logging.getLogger(__name__)


def get_project_root() -> str:
    """Searches upwards for pyproject.toml; falls back to the working directory."""
    current_path = pathlib.Path(__file__).resolve()
    while current_path != current_path.parent:
        if (current_path / "pyproject.toml").exists():
            return str(current_path)
        current_path = current_path.parent
    return os.getcwd()


PROJECT_ROOT = get_project_root()


def load_app_config(config_path: str = None) -> configparser.ConfigParser:
    config = configparser.ConfigParser()

    if config_path is None:
        override_path = os.getenv(CONFIG_OVERRIDE_ENV)
        if override_path and os.path.exists(override_path):
            config_path = override_path
            logger.debug(f"Using override config from env var: {config_path}")
        else:
            config_path = os.path.join(PROJECT_ROOT, CONFIG_FILENAME)

    if os.path.exists(config_path):
        try:
            # 'utf-8-sig' tolerates a BOM written by some editors.
            config.read(config_path, encoding='utf-8-sig')
            logger.debug(f"Successfully loaded configuration from: {config_path}")
        except configparser.Error as e:
            logger.error(f"Error parsing configuration file {config_path}: {e}")
    else:
        logger.debug(f"{CONFIG_FILENAME} not found at {config_path}. Using fallbacks.")

    return config


def load_env_vars() -> bool:
    """Loads environment variables from the .env file at the project root."""
    dotenv_path = os.path.join(PROJECT_ROOT, DOTENV_FILENAME)
    if not os.path.exists(dotenv_path):
        return False
    if load_dotenv(dotenv_path):
        logger.debug(f"Successfully loaded .env file from: {dotenv_path}")
        return True
    logger.warning(f"Found .env file at {dotenv_path}, but it may be empty or failed to load.")
    return False


def get_config_value(config: configparser.ConfigParser, section: str, key: str,
                     fallback=None, value_type=str):
    """
    Gets a typed value from a ConfigParser, with a fallback, type conversion,
    and stripping of inline comments.

    Args:
        config (configparser.ConfigParser): The loaded config object.
        section (str): The section name in the INI file.
        key (str): The key name in the section.
        fallback: Returned if the key is missing or conversion fails.
        value_type (type): The expected type (str, int, float, bool).

    Returns:
        The configured value converted to value_type, or the fallback.
    """
    if not config.has_option(section, key):
        return fallback

    raw_value = config.get(section, key)
    cleaned_value = raw_value
    for comment_char in [';', '#']:
        if comment_char in cleaned_value:
            cleaned_value = cleaned_value.split(comment_char, 1)[0]
    cleaned_value = cleaned_value.strip()

    if value_type == str:
        if cleaned_value.lower() == 'none':
            return None
        return cleaned_value
    if value_type == bool:
        if cleaned_value.lower() in configparser.ConfigParser.BOOLEAN_STATES:
            return configparser.ConfigParser.BOOLEAN_STATES[cleaned_value.lower()]
        logger.warning(f"Config: Error converting [{section}]/{key} value '{raw_value}' "
                       f"to bool. Using fallback: {fallback}")
        return fallback
    if value_type in (int, float):
        try:
            return value_type(cleaned_value)
        except ValueError:
            logger.warning(f"Config: Error converting [{section}]/{key} value '{raw_value}' "
                           f"(cleaned: '{cleaned_value}') to {value_type.__name__}. "
                           f"Using fallback: {fallback}")
            return fallback

    logger.error(f"Config: Unsupported value_type '{value_type.__name__}' for key '{key}'. Using fallback.")
    return fallback


# Global config object, loaded once
APP_CONFIG = load_app_config()
ENV_LOADED = load_env_vars()

# === End of src/config_loader.py ===
