# topmark:header:start
#
#   project      : Algomagic
#   file         : console.py
#   file_relpath : src/algomagic/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""User-facing output for the Algomagic CLI.

Results (normalized text, HTML, JSON, written paths) go to stdout so they can
be piped; warnings and errors go to stderr. Diagnostics belong to `logging`.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click


class ClickConsole:
    """Thin wrapper over `click.echo` that remembers the color decision.

    Streams are looked up at write time when not given, so a console created
    inside `click.testing.CliRunner` writes to the captured streams.

    Args:
        enable_color (bool): Emit ANSI styles; when False they are stripped.
        out (TextIO | None): Result stream (default: current `sys.stdout`).
        err (TextIO | None): Diagnostic stream (default: current `sys.stderr`).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out
        self.err = err

    def _emit(self, text: str, *, to_err: bool, nl: bool, fg: str | None = None) -> None:
        stream = (self.err or sys.stderr) if to_err else (self.out or sys.stdout)
        if fg is not None and self.enable_color:
            text = click.style(text, fg=fg)
        click.echo(text, nl=nl, file=stream, color=self.enable_color)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a result line to stdout."""
        self._emit(text, to_err=False, nl=nl)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a yellow warning to stderr."""
        self._emit(text, to_err=True, nl=nl, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write a red error to stderr."""
        self._emit(text, to_err=True, nl=nl, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` passed through `click.style`, or unchanged without color."""
        return click.style(text, **style_kwargs) if self.enable_color else text
