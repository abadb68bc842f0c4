# topmark:header:start
#
#   project      : Algomagic
#   file         : cmd_common.py
#   file_relpath : src/algomagic/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Helpers shared by the Algomagic subcommands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from algomagic.cli.errors import AlgomagicConfigError, cli_error_for
from algomagic.config import MutableConfig
from algomagic.config.logging import get_logger

if TYPE_CHECKING:
    from algomagic.cli.console import ClickConsole
    from algomagic.config import Config
    from algomagic.config.logging import AlgomagicLogger

logger: AlgomagicLogger = get_logger(__name__)

STDIN_MARKER: str = "-"


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the Click context by the group."""
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (``-1`` quiet, ``0`` default, ``>0`` verbose)."""
    return int(ctx.obj.get("verbosity_level", 0))


def build_config(ctx: click.Context, *, data_dir: str | None = None) -> Config:
    """Discover, merge and freeze the configuration for this invocation.

    Args:
        ctx (click.Context): Current context; ``ctx.obj["config_file"]`` holds ``--config``.
        data_dir (str | None): CLI override for ``[paths] data_dir`` (relative to CWD).

    Returns:
        Config: The frozen configuration.

    Raises:
        AlgomagicConfigError: If a config file is missing, unreadable or invalid.
    """
    config_file: str | None = ctx.obj.get("config_file")
    extra = Path(config_file) if config_file else None
    if extra is not None and not extra.is_file():
        raise AlgomagicConfigError(f"{extra}: config file not found")
    try:
        draft: MutableConfig = MutableConfig.load_merged(extra_config=extra)
        if data_dir is not None:
            draft.data_dir = Path(data_dir).resolve()
        config = draft.freeze()
    except (OSError, ValueError) as exc:
        raise AlgomagicConfigError(f"Invalid configuration: {exc}") from exc
    logger.debug("Effective config: %s", config)
    return config


def read_source(path: str) -> str:
    """Return the UTF-8 text of ``path``, or of STDIN when ``path`` is ``-``.

    Raises:
        AlgomagicCliError: Mapped from the underlying I/O or decoding error.
    """
    if path == STDIN_MARKER:
        return click.get_text_stream("stdin").read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise cli_error_for(exc, path) from exc


def write_output(text: str, path: str | None, console: ClickConsole) -> None:
    """Write ``text`` to ``path`` or print it when no path is given."""
    if path is None or path == STDIN_MARKER:
        console.print(text, nl=False)
        return
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise cli_error_for(exc, path) from exc
    logger.info("Wrote %s", path)
