# topmark:header:start
#
#   project      : Algomagic
#   file         : render.py
#   file_relpath : src/algomagic/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Algomagic `render` command: render a problem JSON record to an HTML page."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from algomagic.authoring.models import Problem
from algomagic.catalog import Catalog
from algomagic.cli.cmd_common import build_config, get_console, read_source, write_output
from algomagic.cli.errors import AlgomagicFileNotFoundError, AlgomagicUsageError, cli_error_for
from algomagic.cli.options import data_dir_option
from algomagic.core.errors import RecordValidationError
from algomagic.rendering.html import page_html, render_problem_page

if TYPE_CHECKING:
    from pathlib import Path


@click.command(
    name="render",
    help=(
        "Render a problem JSON record (FILE or '-') to a standalone HTML page. "
        "With --from-catalog the argument is DIFFICULTY/CATEGORY/ID in the data catalog."
    ),
)
@click.argument("source", metavar="PROBLEM_JSON")
@click.option(
    "-o",
    "--output",
    "output",
    type=click.Path(dir_okay=False, path_type=str),
    default=None,
    help="Write the page to this file instead of STDOUT.",
)
@click.option(
    "--from-catalog",
    "from_catalog",
    is_flag=True,
    help="Resolve the argument as DIFFICULTY/CATEGORY/ID in the data directory.",
)
@data_dir_option
def render_command(
    *,
    source: str,
    output: str | None = None,
    from_catalog: bool = False,
    data_dir: str | None = None,
) -> None:
    """Render ``source`` and write the page."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    config = build_config(ctx, data_dir=data_dir)

    if from_catalog:
        problem = _lookup(source, config.data_dir)
    else:
        try:
            problem = Problem.from_json(read_source(source))
        except RecordValidationError as exc:
            raise cli_error_for(exc, source) from exc

    rendered = render_problem_page(problem, config=config)
    if not rendered.available:
        console.warn(f"{source}: content unavailable; wrote fallback page")
    write_output(page_html(rendered), output, console)


def _lookup(reference: str, data_dir: Path) -> Problem:
    parts = reference.strip("/").split("/")
    if len(parts) != 3 or not all(parts):
        raise AlgomagicUsageError(f"{reference}: expected DIFFICULTY/CATEGORY/ID")
    problem = Catalog.load(data_dir).get_problem(*parts)
    if problem is None:
        raise AlgomagicFileNotFoundError(f"{reference}: no such problem in {data_dir}")
    return problem
