# topmark:header:start
#
#   project      : Algomagic
#   file         : options.py
#   file_relpath : src/algomagic/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, config file) and
their resolution logic, so commands and the group can stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from algomagic.cli.errors import AlgomagicUsageError

P = ParamSpec("P")
R = TypeVar("R")


class OutputFormat(str, Enum):
    """Machine-readable or human-readable command output."""

    TEXT = "text"
    HTML = "html"
    JSON = "json"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, otherwise the ``-v`` count.

    Raises:
        AlgomagicUsageError: If both flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise AlgomagicUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase program output. Specify twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only print results and errors.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(mode: ColorMode, *, isatty: bool | None = None) -> bool:
    """Decide whether console output is colored.

    An explicit ``always`` or ``never`` wins. For ``auto``, a non-empty
    ``FORCE_COLOR`` other than ``0`` turns color on, any ``NO_COLOR`` turns it
    off, and otherwise color follows whether stdout is a terminal.
    """
    if mode is not ColorMode.AUTO:
        return mode is ColorMode.ALWAYS
    if os.getenv("FORCE_COLOR", "0") not in ("", "0"):
        return True
    if "NO_COLOR" in os.environ:
        return False
    return sys.stdout.isatty() if isatty is None else isatty


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color {auto,always,never}`` and ``--no-color`` to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def config_file_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config FILE`` (highest-precedence config file) to a command."""
    return click.option(
        "--config",
        "config_file",
        type=click.Path(dir_okay=False, path_type=str),
        default=None,
        help="Read configuration from FILE (overrides discovered project config).",
    )(f)


def data_dir_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--data-dir DIR`` (overrides ``[paths] data_dir``) to a command."""
    return click.option(
        "--data-dir",
        "data_dir",
        type=click.Path(file_okay=False, path_type=str),
        default=None,
        help="Root of the generated JSON/SQL data (overrides [paths] data_dir).",
    )(f)
