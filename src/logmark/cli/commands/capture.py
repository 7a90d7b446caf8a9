# topmark:header:start
#
#   project      : LogMark
#   file         : capture.py
#   file_relpath : src/logmark/cli/commands/capture.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LogMark `capture` command.

Reads text (a file or STDIN), feeds it into a fresh execution context through a
capturing console, then drains the context and emits the messages.

By default each input line becomes one message and is escaped as plain markup.
``--raw`` trusts the input to be valid markup already; ``--whole`` captures the
entire input as a single message.
"""

from __future__ import annotations

import click

from logmark.cli.cmd_common import drain_and_emit, new_execution_context, resolve_command_config
from logmark.cli.errors import LogmarkUsageError
from logmark.cli.io import read_input_text, split_input_lines, strip_final_newline
from logmark.cli.options import config_options, input_argument, output_format_option
from logmark.cli_shared.capture_console import CollectorConsole
from logmark.config.logging import LogmarkLogger, get_logger
from logmark.core.formats import OutputFormat

logger: LogmarkLogger = get_logger(__name__)


def _pick(flag_on: bool, flag_off: bool, *, names: tuple[str, str]) -> bool | None:
    """Resolve a pair of opposite flags into an override (None if neither was given)."""
    if flag_on and flag_off:
        raise LogmarkUsageError(f"The '{names[0]}' and '{names[1]}' options are mutually exclusive.")
    if flag_on:
        return True
    if flag_off:
        return False
    return None


@click.command(
    name="capture",
    help="Capture text into markup-safe messages (reads STDIN for '-' or no PATH).",
)
@input_argument
@click.option("--escape", "escape_flag", is_flag=True, help="Escape input as plain markup.")
@click.option("--raw", "raw_flag", is_flag=True, help="Treat input as already-escaped markup.")
@click.option("--lines", "lines_flag", is_flag=True, help="One message per input line.")
@click.option("--whole", "whole_flag", is_flag=True, help="One message for the whole input.")
@output_format_option
@config_options
def capture_command(
    *,
    path: str,
    escape_flag: bool,
    raw_flag: bool,
    lines_flag: bool,
    whole_flag: bool,
    output_format: OutputFormat | None,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Capture text into markup-safe messages."""
    config = resolve_command_config(
        config_paths=config_paths,
        no_config=no_config,
        escape=_pick(escape_flag, raw_flag, names=("--escape", "--raw")),
        split_lines=_pick(lines_flag, whole_flag, names=("--lines", "--whole")),
        output_format=output_format,
    )
    exec_ctx = new_execution_context(config)
    text: str = read_input_text(path)

    items: list[str]
    if config.split_lines:
        items = split_input_lines(text)
    else:
        items = [strip_final_newline(text)] if text else []

    console = CollectorConsole(exec_ctx.collector, escaped=not config.escape)
    for item in items:
        console.print(item)
    logger.debug("Captured %d item(s) from %s", len(items), path)

    drain_and_emit(exec_ctx)
