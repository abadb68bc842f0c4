# topmark:header:start
#
#   project      : Algomagic
#   file         : logging.py
#   file_relpath : src/algomagic/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Diagnostic logging for Algomagic.

Adds a ``TRACE`` level five below DEBUG (used by the pipeline steps), a
logger class with a matching ``trace()`` method, and a formatter that colors
each record by severity with yachalk.

Program output for users goes through `algomagic.cli.console.ClickConsole`;
these loggers are for diagnostics and stay silent (CRITICAL) unless
``ALGOMAGIC_LOG_LEVEL`` says otherwise.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Callable, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "ALGOMAGIC_LOG_LEVEL"

BRIEF_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DETAILED_FORMAT: Final[str] = "[%(levelname)s] %(name)s:%(lineno)d %(funcName)s(): %(message)s"


class AlgomagicLogger(logging.Logger):
    """`logging.Logger` with a ``trace()`` shortcut for `TRACE_LEVEL`."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE severity.

        Args:
            msg (object): Message or format string.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the record.
        """
        if not self.isEnabledFor(TRACE_LEVEL):
            return
        self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(AlgomagicLogger)


# Highest threshold first; records below TRACE fall through to the dim style.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """`logging.Formatter` that colors the whole line by record severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Return the formatted record wrapped in the color for its level."""
        text = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(text)
        return chalk.dim(text)


def resolve_env_log_level() -> int | None:
    """Read the log level from ``ALGOMAGIC_LOG_LEVEL``.

    Accepts a level name in any case (``trace``, ``DEBUG``, ``Warn``...) or a
    number. Unknown names and an unset or empty variable give None.
    """
    raw = (os.environ.get(LOG_LEVEL_ENV_VAR) or "").strip()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None) -> None:
    """(Re)configure the root logger with a single colored stderr handler.

    Args:
        level (int | None): Threshold for the root logger. None falls back to
            the environment, then to CRITICAL. Below INFO, records also show
            the logger name, line number and function.
    """
    if level is None:
        level = resolve_env_log_level()
    if level is None:
        level = logging.CRITICAL

    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(BRIEF_FORMAT if level >= logging.INFO else DETAILED_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> AlgomagicLogger:
    """Return the `AlgomagicLogger` registered under ``name``."""
    return cast("AlgomagicLogger", logging.getLogger(name))
