# topmark:header:start
#
#   project      : LogMark
#   file         : codeblock.py
#   file_relpath : src/logmark/cli/commands/codeblock.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LogMark `codeblock` command.

Wraps the input in a fenced code block and emits it as one message.

With ``--structured`` the input is parsed as JSON when possible and rendered in
its structured form (a ``json``-tagged block); input that is not valid JSON is
rendered as its debug representation.
"""

from __future__ import annotations

import json

import click

from logmark.cli.cmd_common import drain_and_emit, new_execution_context, resolve_command_config
from logmark.cli.io import read_input_text, strip_final_newline
from logmark.cli.options import input_argument, output_format_option
from logmark.config.logging import LogmarkLogger, get_logger
from logmark.core.code_block import CodeBlock
from logmark.core.formats import OutputFormat

logger: LogmarkLogger = get_logger(__name__)


def _load_value(text: str) -> object:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        logger.debug("Input is not JSON; rendering it as a string")
        return text


@click.command(
    name="codeblock",
    help="Wrap PATH (or STDIN) in a fenced code block.",
)
@input_argument
@click.option(
    "--structured",
    is_flag=True,
    default=False,
    help="Parse the input as JSON and render its structured form.",
)
@output_format_option
def codeblock_command(
    *,
    path: str,
    structured: bool,
    output_format: OutputFormat | None,
) -> None:
    """Wrap the input in a fenced code block."""
    text: str = strip_final_newline(read_input_text(path))
    exec_ctx = new_execution_context(
        resolve_command_config(no_config=True, output_format=output_format)
    )
    if structured:
        exec_ctx.println_escaped(repr(CodeBlock(_load_value(text))))
    else:
        exec_ctx.println_escaped(str(CodeBlock(text)))
    drain_and_emit(exec_ctx)
