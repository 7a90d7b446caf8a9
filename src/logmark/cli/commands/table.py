# topmark:header:start
#
#   project      : LogMark
#   file         : table.py
#   file_relpath : src/logmark/cli/commands/table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LogMark `table` command.

Reads delimited rows (tab-separated by default) and renders them with the
3-cells-per-chunk table layout as one pre-escaped message.
"""

from __future__ import annotations

import csv
import io

import click

from logmark.cli.cmd_common import drain_and_emit, new_execution_context, resolve_command_config
from logmark.cli.errors import LogmarkUsageError
from logmark.cli.io import read_input_text
from logmark.cli.options import config_options, input_argument, output_format_option
from logmark.core.formats import OutputFormat

_DELIMITER_ALIASES: dict[str, str] = {"\\t": "\t", "tab": "\t", "TAB": "\t"}


def parse_rows(text: str, delimiter: str) -> list[list[str]]:
    """Split delimited ``text`` into rows of cells; empty lines are skipped.

    Quotes carry no meaning: cells are markup text and keep every character.
    """
    reader = csv.reader(io.StringIO(text), delimiter=delimiter, quoting=csv.QUOTE_NONE)
    return [row for row in reader if row]


@click.command(
    name="table",
    help="Render delimited rows as a markup table message (reads STDIN for '-' or no PATH).",
)
@input_argument
@click.option(
    "--delimiter",
    "-d",
    default="\t",
    show_default="TAB",
    help="Single-character cell delimiter ('\\t' or 'tab' for TAB).",
)
@click.option(
    "--escape-cells",
    is_flag=True,
    default=False,
    help="Escape raw cell text as plain markup before formatting.",
)
@output_format_option
@config_options
def table_command(
    *,
    path: str,
    delimiter: str,
    escape_cells: bool,
    output_format: OutputFormat | None,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Render delimited rows as a markup table message."""
    delimiter = _DELIMITER_ALIASES.get(delimiter, delimiter)
    if len(delimiter) != 1:
        raise LogmarkUsageError(f"The delimiter must be a single character, got {delimiter!r}.")

    config = resolve_command_config(
        config_paths=config_paths,
        no_config=no_config,
        escape_cells=True if escape_cells else None,
        output_format=output_format,
    )
    exec_ctx = new_execution_context(config)
    rows = parse_rows(read_input_text(path), delimiter)
    exec_ctx.print_table(rows)
    drain_and_emit(exec_ctx)
