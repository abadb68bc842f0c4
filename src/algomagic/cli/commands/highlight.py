# topmark:header:start
#
#   project      : Algomagic
#   file         : highlight.py
#   file_relpath : src/algomagic/cli/commands/highlight.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Algomagic `highlight` command.

Highlights reference-solution code line by line and prints either the joined
HTML fragment or a JSON document with per-line details.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from algomagic.cli.cmd_common import build_config, get_console, read_source
from algomagic.cli.options import OutputFormat
from algomagic.highlight.highlighter import LineHighlighter

if TYPE_CHECKING:
    from algomagic.highlight.highlighter import HighlightResult


def result_to_dict(result: HighlightResult) -> dict[str, Any]:
    """Return a JSON-serializable view of a highlight result."""
    return {
        "language": result.language,
        "highlighted": result.highlighted,
        "lines": [
            {
                "number": line.number,
                "is_comment": line.is_comment,
                "raw_text": line.raw_text,
                "html": line.highlighted_html,
            }
            for line in result.lines
        ],
        "html": result.html,
    }


@click.command(
    name="highlight",
    help="Highlight reference-solution code (FILE or '-' for STDIN) line by line.",
)
@click.argument("source", metavar="FILE")
@click.option(
    "-l",
    "--language",
    required=True,
    help="Language of the code (python, cpp, c, or an alias).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([OutputFormat.HTML.value, OutputFormat.JSON.value]),
    default=OutputFormat.HTML.value,
    show_default=True,
    help="Output format.",
)
def highlight_command(
    *,
    source: str,
    language: str,
    output_format: str = OutputFormat.HTML.value,
) -> None:
    """Print the highlighted form of ``source``."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    config = build_config(ctx)

    result = LineHighlighter.from_config(config).highlight(read_source(source), language)
    if not result.highlighted:
        console.warn(f"Unknown language '{language}'; output is not highlighted.")

    if output_format == OutputFormat.JSON.value:
        console.print(json.dumps(result_to_dict(result), ensure_ascii=False, indent=2))
    else:
        console.print(result.html)
