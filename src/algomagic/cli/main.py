# topmark:header:start
#
#   project      : Algomagic
#   file         : main.py
#   file_relpath : src/algomagic/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Algomagic command-line entry point.

Key ideas:
- Group-level options are initialized once and placed into ``ctx.obj``.
- Subcommands read the console and the ``--config`` path from ``ctx.obj`` and
  build their configuration through `algomagic.cli.cmd_common.build_config`.
"""

from __future__ import annotations

import click

from algomagic.cli.commands.convert import convert_command
from algomagic.cli.commands.copy import copy_command
from algomagic.cli.commands.highlight import highlight_command
from algomagic.cli.commands.list import list_command
from algomagic.cli.commands.normalize import normalize_command
from algomagic.cli.commands.process import process_command
from algomagic.cli.commands.render import render_command
from algomagic.cli.commands.search import search_command
from algomagic.cli.commands.sql import sql_command
from algomagic.cli.commands.version import version_command
from algomagic.cli.console import ClickConsole
from algomagic.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    config_file_option,
    resolve_color_mode,
    resolve_verbosity,
)
from algomagic.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    config_file: str | None,
) -> None:
    """Initialize shared state (verbosity, color, console, config path) on the context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Value of ``--color``, or None when not given.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_file (str | None): Explicit ``--config`` file.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Diagnostics follow ALGOMAGIC_LOG_LEVEL; -v/-q only affect program output.
    log_level = resolve_env_log_level()
    setup_logging(level=log_level)
    ctx.obj["log_level"] = log_level

    mode = ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO.value)
    enable_color = resolve_color_mode(mode)
    ctx.color = ctx.obj["color_enabled"] = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    ctx.obj["config_file"] = config_file


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Algomagic content tools: normalize, highlight, render and convert problems.",
)
@common_verbose_options
@common_color_options
@config_file_option
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    config_file: str | None,
) -> None:
    """Entry point for the Algomagic CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_file=config_file,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'algomagic render PROBLEM_JSON' to render a problem page.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(normalize_command)

cli.add_command(highlight_command)

cli.add_command(copy_command)

cli.add_command(render_command)

cli.add_command(convert_command)

cli.add_command(sql_command)

cli.add_command(process_command)

cli.add_command(search_command)
cli.add_command(list_command)

if __name__ == "__main__":
    cli()
