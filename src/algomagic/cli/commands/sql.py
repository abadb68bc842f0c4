# topmark:header:start
#
#   project      : Algomagic
#   file         : sql.py
#   file_relpath : src/algomagic/cli/commands/sql.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Algomagic `sql` command: JSON record to a SQL upsert script."""

from __future__ import annotations

from pathlib import Path

import click

from algomagic.authoring.batch import RecordKind
from algomagic.authoring.models import Category, Problem
from algomagic.authoring.sql import record_sql, write_sql
from algomagic.cli.cmd_common import get_console, read_source
from algomagic.cli.commands.convert import KIND_CHOICE
from algomagic.cli.errors import cli_error_for
from algomagic.core.errors import RecordValidationError


@click.command(
    name="sql",
    help="Generate the SQL upsert script for a category or problem JSON record.",
)
@click.argument("kind", type=KIND_CHOICE)
@click.argument("source", metavar="FILE", type=click.Path(dir_okay=False, path_type=str))
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    help="Print the script instead of writing it next to FILE.",
)
def sql_command(*, kind: str, source: str, to_stdout: bool = False) -> None:
    """Write (or print) the SQL script for ``source``."""
    console = get_console(click.get_current_context())
    text = read_source(source)
    try:
        if RecordKind(kind) is RecordKind.CATEGORY:
            record: Category | Problem = Category.from_json(text)
        else:
            record = Problem.from_json(text)
    except RecordValidationError as exc:
        raise cli_error_for(exc, source) from exc

    if to_stdout:
        console.print(record_sql(record), nl=False)
        return
    try:
        sql_path = write_sql(record, Path(source))
    except OSError as exc:
        raise cli_error_for(exc, source) from exc
    console.print(str(sql_path))
