# topmark:header:start
#
#   project      : Algomagic
#   file         : version.py
#   file_relpath : src/algomagic/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Algomagic `version` command.

Prints the current Algomagic version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from algomagic.cli.cmd_common import get_console
from algomagic.cli.options import OutputFormat
from algomagic.constants import ALGOMAGIC_VERSION


@click.command(
    name="version",
    help="Show the current version of Algomagic.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([OutputFormat.TEXT.value, OutputFormat.JSON.value]),
    default=OutputFormat.TEXT.value,
    show_default=True,
    help="Output format.",
)
def version_command(*, output_format: str = OutputFormat.TEXT.value) -> None:
    """Show the current version of Algomagic."""
    console = get_console(click.get_current_context())
    if output_format == OutputFormat.JSON.value:
        console.print(json.dumps({"version": ALGOMAGIC_VERSION}))
    else:
        console.print(ALGOMAGIC_VERSION)
