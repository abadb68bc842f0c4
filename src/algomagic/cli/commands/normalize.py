# topmark:header:start
#
#   project      : Algomagic
#   file         : normalize.py
#   file_relpath : src/algomagic/cli/commands/normalize.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Algomagic `normalize` command.

Reads authored content from a file (or STDIN) and prints the normalized text:
escapes resolved and fenced code blocks restored.
"""

from __future__ import annotations

import click

from algomagic.cli.cmd_common import STDIN_MARKER, get_console, read_source
from algomagic.cli.errors import cli_error_for
from algomagic.core.errors import AlgomagicError
from algomagic.pipeline import normalize_content


@click.command(
    name="normalize",
    help="Resolve \\n / \\\\n escapes in authored content (FILE or '-' for STDIN).",
)
@click.argument("source", metavar="[FILE]", required=False, default=STDIN_MARKER)
def normalize_command(*, source: str = STDIN_MARKER) -> None:
    """Print the normalized form of ``source``."""
    console = get_console(click.get_current_context())
    text = read_source(source)
    try:
        console.print(normalize_content(text), nl=False)
    except AlgomagicError as exc:
        raise cli_error_for(exc, source) from exc
