# topmark:header:start
#
#   project      : Algomagic
#   file         : list.py
#   file_relpath : src/algomagic/cli/commands/list.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Algomagic `list` command: browse the data catalog level by level.

Without arguments the difficulties are listed, with DIFFICULTY its
categories, and with DIFFICULTY and CATEGORY the problems of that category.
Categories and problems come in their authored ``order``.
"""

from __future__ import annotations

import json
from typing import Any

import click

from algomagic.catalog import Catalog
from algomagic.cli.cmd_common import build_config, get_console, get_effective_verbosity
from algomagic.cli.options import OutputFormat, data_dir_option


@click.command(
    name="list",
    help="List difficulties, the categories of DIFFICULTY, or the problems of CATEGORY.",
)
@click.argument("difficulty", required=False, default=None)
@click.argument("category", required=False, default=None)
@data_dir_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice([OutputFormat.TEXT.value, OutputFormat.JSON.value]),
    default=OutputFormat.TEXT.value,
    show_default=True,
    help="Output format.",
)
def list_command(
    *,
    difficulty: str | None = None,
    category: str | None = None,
    data_dir: str | None = None,
    output_format: str = OutputFormat.TEXT.value,
) -> None:
    """Print one level of the catalog."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    catalog = Catalog.load(build_config(ctx, data_dir=data_dir).data_dir)

    rows: list[dict[str, Any]]
    if difficulty is None:
        rows = [{"id": d} for d in catalog.difficulties()]
    elif category is None:
        rows = [
            {"id": c.id, "title": c.title, "iconId": c.icon_id, "order": c.order}
            for c in catalog.categories_for(difficulty)
        ]
    else:
        rows = [
            {"id": p.id, "title": p.title, "order": p.order}
            for p in catalog.problems_in(difficulty, category)
        ]

    if output_format == OutputFormat.JSON.value:
        console.print(json.dumps(rows, ensure_ascii=False, indent=2))
        return
    for row in rows:
        console.print("\t".join(str(row[k]) for k in ("id", "title") if k in row))
    if not rows and get_effective_verbosity(ctx) >= 0:
        console.warn("Nothing listed: no matching records in the data directory.")
