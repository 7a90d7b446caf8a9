# topmark:header:start
#
#   project      : LogMark
#   file         : emitters.py
#   file_relpath : src/logmark/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Emit drained messages through the program-output console.

The messages are markup-safe already; emitters only choose the framing:

- ``markdown``: messages separated by a blank line;
- ``json``: one envelope holding the message list;
- ``ndjson``: one record per message.

Messages are never styled, whatever the console's color setting.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from logmark.core.formats import OutputFormat
from logmark.core.machine import messages_to_json, messages_to_ndjson

if TYPE_CHECKING:
    from collections.abc import Sequence

    from logmark.cli_shared.console_api import ConsoleLike

MESSAGE_SEPARATOR: str = "\n\n"


def render_messages(messages: Sequence[str], fmt: OutputFormat) -> str:
    """Render ``messages`` in ``fmt`` (no trailing newline for markdown/json)."""
    if fmt == OutputFormat.JSON:
        return messages_to_json(messages)
    if fmt == OutputFormat.NDJSON:
        return messages_to_ndjson(messages)
    return MESSAGE_SEPARATOR.join(messages)


def emit_messages(console: ConsoleLike, messages: Sequence[str], fmt: OutputFormat) -> None:
    """Write drained ``messages`` to ``console`` in the requested format.

    Args:
        console: Program-output console.
        messages: Drained, markup-safe messages.
        fmt: Output format.
    """
    if fmt == OutputFormat.NDJSON:
        # Each record already ends with a newline.
        console.print(render_messages(messages, fmt), nl=False)
        return
    if fmt == OutputFormat.MARKDOWN and not messages:
        return
    console.print(render_messages(messages, fmt))
