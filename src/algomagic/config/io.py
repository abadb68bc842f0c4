# topmark:header:start
#
#   project      : Algomagic
#   file         : io.py
#   file_relpath : src/algomagic/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Lightweight TOML I/O helpers for Algomagic configuration.

This module centralizes **pure** helpers for reading TOML used by the
configuration layer. Keeping them separate from the model avoids import cycles
and keeps `algomagic.config.model` focused on merging.

Typical flow:
    1. Load defaults from the packaged resource (``load_defaults_dict``).
    2. Load project/user TOML files (``load_toml_dict``).
    3. Normalize and inspect values using typed helpers
       (``get_table_value``, ``get_string_value``, etc.).
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from algomagic.config.logging import get_logger
from algomagic.constants import DEFAULT_TOML_CONFIG_NAME, DEFAULT_TOML_CONFIG_PACKAGE

if TYPE_CHECKING:
    from pathlib import Path

    from algomagic.config.logging import AlgomagicLogger

logger: AlgomagicLogger = get_logger(__name__)

TomlTable = dict[str, Any]

__all__: list[str] = [
    "TomlTable",
    "is_toml_table",
    "get_table_value",
    "get_string_value_or_none",
    "get_bool_value_or_none",
    "get_int_value_or_none",
    "get_string_list_or_none",
    "parse_toml",
    "load_defaults_dict",
    "load_toml_dict",
]


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping."""
    return isinstance(val, dict)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Args:
        table (TomlTable): Parent table.
        key (str): Sub-table key.

    Returns:
        TomlTable: The sub-table if present and a table; otherwise an empty dict.
    """
    value = table.get(key)
    if value is None:
        return {}
    if not is_toml_table(value):
        logger.warning("Ignoring [%s]: expected a table, got %s", key, type(value).__name__)
        return {}
    return value


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Return ``table[key]`` when it is a string, else None (warning on wrong type)."""
    value = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Ignoring '%s': expected a string, got %s", key, type(value).__name__)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Return ``table[key]`` when it is a bool, else None (warning on wrong type)."""
    value = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    logger.warning("Ignoring '%s': expected a boolean, got %s", key, type(value).__name__)
    return None


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Return ``table[key]`` when it is an int (not a bool), else None."""
    value = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    logger.warning("Ignoring '%s': expected an integer, got %s", key, type(value).__name__)
    return None


def get_string_list_or_none(table: TomlTable, key: str) -> list[str] | None:
    """Return ``table[key]`` as a list of strings, dropping non-string items.

    Returns None when the key is absent or the value is not a list.
    """
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        logger.warning("Ignoring '%s': expected a list, got %s", key, type(value).__name__)
        return None
    items = cast("list[Any]", value)
    out: list[str] = [v for v in items if isinstance(v, str)]
    if len(out) != len(items):
        logger.warning("Dropped %d non-string item(s) from '%s'", len(items) - len(out), key)
    return out


def parse_toml(text: str) -> TomlTable:
    """Parse a TOML document into plain Python containers.

    Args:
        text (str): TOML source.

    Returns:
        TomlTable: The parsed document as nested ``dict``/``list`` values.

    Raises:
        ValueError: If the document is not valid TOML.
    """
    try:
        doc = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ValueError(f"Invalid TOML: {exc}") from exc
    return cast("TomlTable", doc.unwrap())


def load_defaults_dict() -> TomlTable:
    """Return the bundled default configuration as a TOML table."""
    resource = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    logger.debug("Loading default config from package resource %s", DEFAULT_TOML_CONFIG_NAME)
    return parse_toml(resource.read_text(encoding="utf-8"))


def load_toml_dict(path: Path) -> TomlTable:
    """Load a TOML file from disk.

    Args:
        path (Path): File to read.

    Returns:
        TomlTable: The parsed document.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not valid TOML.
    """
    logger.debug("Loading TOML file: %s", path)
    return parse_toml(path.read_text(encoding="utf-8"))
