# topmark:header:start
#
#   project      : LogMark
#   file         : ansi.py
#   file_relpath : src/logmark/core/ansi.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal control-sequence stripping.

Text produced for a terminal carries CSI escape sequences (colors, cursor
movement, erase commands). A markup renderer would either print them as garbage
or reject the message, so they are removed before any escaping happens.

The grammar is fixed and shared with the remote rendering surface:

    [\\x1b\\x9b]  \\[  [()#;?]*  (?:[0-9]{1,4}(?:;[0-9]{0,4})*)?  [0-9A-ORZcf-nqry=><]

An introducer (ESC or the 8-bit CSI), an opening bracket, optional private-mode
markers, an optional semicolon-separated numeric parameter list, and exactly one
command byte. Anything that does not match, including a lone ESC or a truncated
sequence, is ordinary text and passes through unchanged.
"""

from __future__ import annotations

import re
from typing import Final

from logmark.config.logging import LogmarkLogger, get_logger

logger: LogmarkLogger = get_logger(__name__)

CONTROL_SEQUENCE_PATTERN: Final[str] = (
    r"[\x1b\x9b]\[[()#;?]*(?:[0-9]{1,4}(?:;[0-9]{0,4})*)?[0-9A-ORZcf-nqry=><]"
)

_CONTROL_SEQUENCE_RE: Final[re.Pattern[str]] = re.compile(CONTROL_SEQUENCE_PATTERN)


def strip_control_sequences(text: str) -> str:
    """Remove every terminal control sequence from ``text``.

    Matching is global, leftmost-first and non-overlapping. The function is
    total: text without a match is returned as-is.

    Args:
        text: Text that may contain terminal control sequences.

    Returns:
        The text with all matching sequences removed.

    Examples:
        >>> strip_control_sequences("\\x1b[1;31merror\\x1b[0m: boom")
        'error: boom'
        >>> strip_control_sequences("\\x1b plain")
        '\\x1b plain'
    """
    stripped, count = _CONTROL_SEQUENCE_RE.subn("", text)
    if count:
        logger.trace("Stripped %d control sequence(s)", count)
    return stripped


def has_control_sequences(text: str) -> bool:
    """Return True if ``text`` contains at least one terminal control sequence."""
    return _CONTROL_SEQUENCE_RE.search(text) is not None
