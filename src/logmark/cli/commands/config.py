# topmark:header:start
#
#   project      : LogMark
#   file         : config.py
#   file_relpath : src/logmark/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LogMark `config` command group.

Subcommands:
    dump: print the effective configuration as TOML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from logmark.cli.cmd_common import resolve_command_config
from logmark.cli.console_helpers import get_console_safely
from logmark.cli.options import config_options
from logmark.config.logging import LogmarkLogger, get_logger
from logmark.config.settings import to_toml

if TYPE_CHECKING:
    from logmark.cli_shared.console_api import ConsoleLike

logger: LogmarkLogger = get_logger(__name__)


@click.group(name="config", help="Inspect LogMark configuration.")
def config_group() -> None:
    """Inspect LogMark configuration."""


@config_group.command(
    name="dump",
    help="Print the effective configuration (defaults, config files) as TOML.",
)
@config_options
@click.option(
    "--pyproject",
    "for_pyproject",
    is_flag=True,
    default=False,
    help="Nest the settings under [tool.logmark] for pasting into pyproject.toml.",
)
def config_dump_command(
    *,
    config_paths: tuple[str, ...],
    no_config: bool,
    for_pyproject: bool,
) -> None:
    """Print the effective configuration as TOML."""
    console: ConsoleLike = get_console_safely()
    config = resolve_command_config(config_paths=config_paths, no_config=no_config)
    for source in config.config_files:
        logger.info("Config source: %s", source)
    console.print(to_toml(config, for_pyproject=for_pyproject), nl=False)
