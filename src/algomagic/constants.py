# topmark:header:start
#
#   project      : Algomagic
#   file         : constants.py
#   file_relpath : src/algomagic/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Algomagic Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    ALGOMAGIC_VERSION: str = get_version("algomagic")
except PackageNotFoundError:  # running from a source checkout
    ALGOMAGIC_VERSION = "0.0.0"

# Name of the bundled default config inside the package `algomagic.config`:
DEFAULT_TOML_CONFIG_PACKAGE: str = "algomagic.config"
DEFAULT_TOML_CONFIG_NAME: str = "algomagic-default.toml"

# Project-local config files, in discovery order:
PYPROJECT_TOML_NAME: str = "pyproject.toml"
LOCAL_TOML_CONFIG_NAME: str = "algomagic.toml"

# Reserved-token namespace (Unicode private use area, BMP):
SENTINEL_FIRST: int = 0xE000
SENTINEL_LAST: int = 0xF8FF

CODE_BLOCK_TOKEN_NAME: str = "CODE_BLOCK"
DOUBLE_ESCAPE_TOKEN_NAME: str = "DOUBLE_BACKSLASH_N"

# Two-character escape (backslash, n) and its three-character literal form:
ESCAPED_NEWLINE: str = "\\n"
DOUBLE_ESCAPED_NEWLINE: str = "\\\\n"

CONTENT_UNAVAILABLE_HTML: str = '<p class="content-unavailable">Content unavailable.</p>'

VALUE_NOT_SET: str = "<not set>"
