# topmark:header:start
#
#   project      : LogMark
#   file         : formats.py
#   file_relpath : src/logmark/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared output format definitions used across LogMark frontends.

This module centralizes the `OutputFormat` enum so CLI commands, machine emitters,
and configuration can agree on the same format vocabulary without introducing
`Click` or console dependencies.

Machine formats (JSON, NDJSON) are intended to be stable and colorless.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for drained messages.

    Attributes:
        MARKDOWN: The messages themselves, separated by blank lines; each one is
            ready to be submitted with the MarkdownV2 parse mode.
        JSON: A single JSON document holding all messages.
        NDJSON: One JSON record per message.
    """

    # Human format:
    MARKDOWN = "markdown"

    # Machine formats:
    JSON = "json"
    NDJSON = "ndjson"


def is_machine_format(fmt: OutputFormat | None) -> bool:
    """Return True for formats intended for machine consumption.

    Args:
        fmt: the output format to be checked.

    Returns:
        `True` if the format provided is a machine format, else `False`.
    """
    return fmt in {OutputFormat.JSON, OutputFormat.NDJSON}
