# topmark:header:start
#
#   project      : LogMark
#   file         : strip.py
#   file_relpath : src/logmark/cli/commands/strip.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LogMark `strip` command.

Prints the input with terminal control sequences removed. The result is plain
text, not markup, so it bypasses the collector and is written as-is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from logmark.cli.console_helpers import get_console_safely
from logmark.cli.io import read_input_text
from logmark.cli.options import input_argument
from logmark.config.logging import LogmarkLogger, get_logger
from logmark.core.ansi import has_control_sequences, strip_control_sequences

if TYPE_CHECKING:
    from logmark.cli_shared.console_api import ConsoleLike

logger: LogmarkLogger = get_logger(__name__)


@click.command(
    name="strip",
    help="Remove terminal control sequences from PATH (or STDIN).",
)
@input_argument
@click.option(
    "--check",
    is_flag=True,
    default=False,
    help="Print nothing; exit with status 1 if the input contains control sequences.",
)
def strip_command(*, path: str, check: bool) -> None:
    """Remove terminal control sequences from the input."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console_safely()
    text: str = read_input_text(path)

    if check:
        found = has_control_sequences(text)
        logger.info("Control sequences %s in %s", "found" if found else "not found", path)
        ctx.exit(1 if found else 0)

    console.print(strip_control_sequences(text), nl=False)
