# topmark:header:start
#
#   project      : Algomagic
#   file         : copy.py
#   file_relpath : src/algomagic/cli/commands/copy.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Algomagic `copy` command: print the copy-ready form of a reference solution."""

from __future__ import annotations

import click

from algomagic.cli.cmd_common import STDIN_MARKER, get_console, read_source
from algomagic.highlight.clipboard import copy_format


@click.command(
    name="copy",
    help="Print reference-solution code as it would be copied to the clipboard.",
)
@click.argument("source", metavar="[FILE]", required=False, default=STDIN_MARKER)
def copy_command(*, source: str = STDIN_MARKER) -> None:
    """Print ``copy_format`` of the code in ``source``."""
    get_console(click.get_current_context()).print(copy_format(read_source(source)), nl=False)
