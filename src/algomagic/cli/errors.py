# topmark:header:start
#
#   project      : Algomagic
#   file         : errors.py
#   file_relpath : src/algomagic/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Exceptions for the Algomagic CLI.

Usage:
    Raise these in CLI commands to signal errors with standardized messages and
    exit codes. Library errors are translated by `cli_error_for`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from algomagic.cli.exit_codes import ExitCode
from algomagic.core.errors import RecordValidationError, ReinjectionError

if TYPE_CHECKING:
    from pathlib import Path


class AlgomagicCliError(click.ClickException):
    """Base class for all Algomagic CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        obj = getattr(ctx, "obj", None) if ctx is not None else None
        console = obj.get("console") if isinstance(obj, dict) else None
        if console is not None:
            console.error(console.styled(self.format_message(), fg="bright_red"))
            return
        super().show(file)


class AlgomagicUsageError(AlgomagicCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class AlgomagicConfigError(AlgomagicCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class AlgomagicFileNotFoundError(AlgomagicCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class AlgomagicIOError(AlgomagicCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class AlgomagicEncodingError(AlgomagicCliError):
    """Error for text decoding errors (input is not UTF-8)."""

    exit_code = ExitCode.ENCODING_ERROR


class AlgomagicPipelineError(AlgomagicCliError):
    """Error for internal pipeline failures (extractor/reinjector out of sync)."""

    exit_code = ExitCode.PIPELINE_ERROR


class AlgomagicPartialFailureError(AlgomagicCliError):
    """Error for batch runs in which some files failed."""

    exit_code = ExitCode.PARTIAL_FAILURE


def cli_error_for(exc: Exception, path: Path | str | None = None) -> AlgomagicCliError:
    """Translate a library or OS exception into the matching CLI error.

    Args:
        exc (Exception): The exception raised by library code.
        path (Path | str | None): The file being processed, for the message.

    Returns:
        AlgomagicCliError: The CLI error to raise.
    """
    where = f"{path}: " if path is not None else ""
    if isinstance(exc, FileNotFoundError):
        return AlgomagicFileNotFoundError(f"{where}no such file")
    if isinstance(exc, UnicodeDecodeError):
        return AlgomagicEncodingError(f"{where}not valid UTF-8 ({exc.reason})")
    if isinstance(exc, OSError):
        return AlgomagicIOError(f"{where}{exc.strerror or exc}")
    if isinstance(exc, ReinjectionError):
        return AlgomagicPipelineError(f"{where}internal pipeline error: {exc}")
    if isinstance(exc, RecordValidationError):
        return AlgomagicCliError(f"{where}invalid record: {exc}")
    return AlgomagicCliError(f"{where}{exc}")
