# topmark:header:start
#
#   project      : Algomagic
#   file         : process.py
#   file_relpath : src/algomagic/cli/commands/process.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Algomagic `process` command: batch-convert a content tree to JSON and SQL."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import click

from algomagic.authoring.batch import RecordKind, process_tree
from algomagic.cli.cmd_common import build_config, get_console, get_effective_verbosity
from algomagic.cli.commands.convert import KIND_CHOICE
from algomagic.cli.errors import AlgomagicFileNotFoundError, AlgomagicPartialFailureError
from algomagic.cli.options import data_dir_option


@click.command(
    name="process",
    help=(
        "Convert every .mdc (category) or .mdx (problem) file under DIR to JSON and SQL. "
        "DIR defaults to the categories/ or problems/ folder of [paths] content_dir. "
        "A failing file is reported and the run continues."
    ),
)
@click.argument("kind", type=KIND_CHOICE)
@click.argument(
    "root",
    metavar="[DIR]",
    required=False,
    default=None,
    type=click.Path(file_okay=False, path_type=str),
)
@click.option(
    "--exclude",
    "exclude_patterns",
    multiple=True,
    help="Gitignore-style pattern (relative to DIR) to skip; may be repeated.",
)
@data_dir_option
def process_command(
    *,
    kind: str,
    root: str | None = None,
    exclude_patterns: tuple[str, ...] = (),
    data_dir: str | None = None,
) -> None:
    """Run the batch conversion and print a per-file summary."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)
    config = build_config(ctx, data_dir=data_dir)
    if exclude_patterns:
        config = replace(config, exclude_patterns=(*config.exclude_patterns, *exclude_patterns))

    record_kind = RecordKind(kind)
    root_path = Path(root) if root is not None else config.content_dir / record_kind.collection
    if not root_path.is_dir():
        raise AlgomagicFileNotFoundError(f"{root_path}: no such directory")

    report = process_tree(record_kind, root_path, config=config)
    for outcome in report.outcomes:
        if outcome.ok:
            if vlevel > 0:
                console.print(f"{console.styled('ok', fg='green')}     {outcome.source}")
        else:
            console.error(f"failed {outcome.source}: {outcome.error}")

    if vlevel >= 0:
        console.print(
            f"{len(report.outcomes)} file(s): "
            f"{len(report.succeeded)} converted, {len(report.failed)} failed"
        )
    if not report.ok:
        raise AlgomagicPartialFailureError(f"{len(report.failed)} file(s) failed")
