# topmark:header:start
#
#   project      : LogMark
#   file         : escape_cmd.py
#   file_relpath : src/logmark/cli/commands/escape_cmd.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LogMark `escape` command.

Escapes text for one markup zone and emits it as a single message. Words given
on the command line are joined with single spaces; without TEXT, STDIN is read.
"""

from __future__ import annotations

import click

from logmark.cli.cli_types import EnumChoiceParam
from logmark.cli.cmd_common import drain_and_emit, new_execution_context, resolve_command_config
from logmark.cli.io import read_input_text, strip_final_newline
from logmark.cli.options import output_format_option
from logmark.core.ansi import strip_control_sequences
from logmark.core.escape import MarkupZone, escape
from logmark.core.formats import OutputFormat


@click.command(
    name="escape",
    help="Escape TEXT (or STDIN) for a markup zone.",
)
@click.argument("text", nargs=-1)
@click.option(
    "--zone",
    type=EnumChoiceParam(MarkupZone),
    default=MarkupZone.PLAIN_TEXT.value,
    show_default=True,
    help="Markup zone: plain text, inline code or link destination.",
)
@output_format_option
def escape_command(
    *,
    text: tuple[str, ...],
    zone: MarkupZone,
    output_format: OutputFormat | None,
) -> None:
    """Escape TEXT (or STDIN) for a markup zone."""
    source: str = " ".join(text) if text else strip_final_newline(read_input_text(None))

    exec_ctx = new_execution_context(
        resolve_command_config(no_config=True, output_format=output_format)
    )
    exec_ctx.println_escaped(escape(strip_control_sequences(source), zone))
    drain_and_emit(exec_ctx)
