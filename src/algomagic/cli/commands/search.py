# topmark:header:start
#
#   project      : Algomagic
#   file         : search.py
#   file_relpath : src/algomagic/cli/commands/search.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Algomagic `search` command: find problems by title in the data catalog."""

from __future__ import annotations

import json

import click

from algomagic.catalog import Catalog
from algomagic.cli.cmd_common import build_config, get_console, get_effective_verbosity
from algomagic.cli.options import OutputFormat, data_dir_option


@click.command(
    name="search",
    help="Search problem titles (case-insensitive substring) in the data catalog.",
)
@click.argument("query")
@data_dir_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice([OutputFormat.TEXT.value, OutputFormat.JSON.value]),
    default=OutputFormat.TEXT.value,
    show_default=True,
    help="Output format.",
)
def search_command(
    *,
    query: str,
    data_dir: str | None = None,
    output_format: str = OutputFormat.TEXT.value,
) -> None:
    """Print the problems whose title contains ``query``."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    config = build_config(ctx, data_dir=data_dir)

    hits = Catalog.load(config.data_dir).search(query)
    if output_format == OutputFormat.JSON.value:
        payload = [
            {
                "id": p.id,
                "title": p.title,
                "description": p.description,
                "difficulty": p.difficulty,
                "category": p.category,
            }
            for p in hits
        ]
        console.print(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    for p in hits:
        console.print(f"{p.difficulty}/{p.category}/{p.id}\t{p.title}")
    if not hits and get_effective_verbosity(ctx) >= 0:
        console.warn(f'No problem titles match "{query}".')
