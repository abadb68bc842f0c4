# topmark:header:start
#
#   project      : Algomagic
#   file         : convert.py
#   file_relpath : src/algomagic/cli/commands/convert.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Algomagic `convert` command: authored MDX/MDC file to a JSON record."""

from __future__ import annotations

from pathlib import Path

import click

from algomagic.authoring.batch import RecordKind, load_record
from algomagic.authoring.models import write_record
from algomagic.cli.cmd_common import build_config, get_console
from algomagic.cli.errors import cli_error_for
from algomagic.cli.options import data_dir_option
from algomagic.core.errors import AlgomagicError

KIND_CHOICE = click.Choice([k.value for k in RecordKind])


@click.command(
    name="convert",
    help="Convert a problem MDX or category MDC file into a JSON record under the data dir.",
)
@click.argument("kind", type=KIND_CHOICE)
@click.argument("source", metavar="FILE", type=click.Path(dir_okay=False, path_type=str))
@data_dir_option
def convert_command(*, kind: str, source: str, data_dir: str | None = None) -> None:
    """Convert ``source`` and print the written JSON path."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    config = build_config(ctx, data_dir=data_dir)

    try:
        record = load_record(RecordKind(kind), Path(source), headings=config.headings)
        json_path = write_record(record, config.data_dir)
    except (AlgomagicError, OSError, UnicodeDecodeError) as exc:
        raise cli_error_for(exc, source) from exc
    console.print(str(json_path))
