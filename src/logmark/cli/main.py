# topmark:header:start
#
#   project      : LogMark
#   file         : main.py
#   file_relpath : src/logmark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the `logmark` command.

Group-level options (verbosity and color) are initialized once and placed into
``ctx.obj``; every subcommand then creates its own execution context, drains it
once and emits the result through the shared console.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from logmark.cli.commands.capture import capture_command
from logmark.cli.commands.codeblock import codeblock_command
from logmark.cli.commands.config import config_group
from logmark.cli.commands.escape_cmd import escape_command
from logmark.cli.commands.strip import strip_command
from logmark.cli.commands.table import table_command
from logmark.cli.commands.version import version_command
from logmark.cli.console import ClickConsole
from logmark.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from logmark.cli_shared.color import ColorMode, resolve_color_mode
from logmark.config.logging import LogmarkLogger, get_logger, setup_logging

if TYPE_CHECKING:
    from logmark.cli_shared.console_api import ConsoleLike

logger: LogmarkLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # -v/-q win over LOGMARK_LOG_LEVEL; setup_logging() consults the env for None.
    level = resolve_verbosity(verbose, quiet)
    setup_logging(level=level)
    ctx.obj["log_level"] = level

    effective_color_mode = ColorMode.NEVER if no_color else color_mode
    enable_color = resolve_color_mode(
        color_mode_override=effective_color_mode,
        output_format=None,
    )
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("Color output %s", "enabled" if enable_color else "disabled")


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="LogMark: capture program output as MarkdownV2-safe messages.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the LogMark CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'logmark capture [PATH|-]' to capture text as messages.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(capture_command)
cli.add_command(table_command)
cli.add_command(escape_command)
cli.add_command(strip_command)
cli.add_command(codeblock_command)
cli.add_command(config_group)
cli.add_command(version_command)

if __name__ == "__main__":
    cli()
