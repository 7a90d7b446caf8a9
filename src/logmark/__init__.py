# topmark:header:start
#
#   project      : LogMark
#   file         : __init__.py
#   file_relpath : src/logmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LogMark package.

LogMark captures the output of a command-line tool instead of writing it to a
terminal. Every message is stripped of terminal control sequences, escaped for a
MarkdownV2-style markup dialect, and buffered per execution context so it can be
drained and forwarded verbatim to a messaging surface.

The public surface is re-exported here:

- [`strip_control_sequences`][logmark.core.ansi.strip_control_sequences]
- [`escape_plain`][logmark.core.escape.escape_plain],
  [`escape_code`][logmark.core.escape.escape_code],
  [`escape_link_destination`][logmark.core.escape.escape_link_destination]
- [`LogCollector`][logmark.core.collector.LogCollector]
- [`print_table`][logmark.core.table.print_table]
- [`ExecutionContext`][logmark.core.context.ExecutionContext]
"""

from __future__ import annotations

from logmark.core.ansi import has_control_sequences, strip_control_sequences
from logmark.core.code_block import CodeBlock, render_code_block
from logmark.core.collector import LogCollector
from logmark.core.context import ExecutionContext
from logmark.core.escape import (
    MarkupZone,
    escape,
    escape_code,
    escape_link_destination,
    escape_plain,
    unescape_plain,
)
from logmark.core.table import Cell, print_table, render_table

__all__ = [
    "Cell",
    "CodeBlock",
    "ExecutionContext",
    "LogCollector",
    "MarkupZone",
    "escape",
    "escape_code",
    "escape_link_destination",
    "escape_plain",
    "has_control_sequences",
    "print_table",
    "render_code_block",
    "render_table",
    "strip_control_sequences",
    "unescape_plain",
]
