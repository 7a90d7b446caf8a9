# topmark:header:start
#
#   project      : LogMark
#   file         : escape.py
#   file_relpath : src/logmark/core/escape.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Backslash escaping for the MarkdownV2 markup dialect.

In the target dialect most ASCII punctuation is syntactically significant. Which
characters must be escaped depends on where the text ends up (its *zone*):

- plain text: all 19 reserved characters ``_*[]()~`>#+-=|{}.!\\``;
- inline code / code blocks: only backslash and backtick;
- link destinations: backslash, backtick and the closing parenthesis.

Every function here is pure and total. Escaping is a single left-to-right pass
that prefixes one backslash to each reserved character; the inserted
backslashes are never scanned again.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class MarkupZone(str, Enum):
    """Syntactic context that decides which characters need escaping.

    Attributes:
        PLAIN_TEXT: Regular message text; the full reserved set is escaped.
        INLINE_CODE: Content of an inline code span or a fenced code block.
        LINK_DESTINATION: The target inside ``(...)`` of an inline link.
    """

    PLAIN_TEXT = "plain"
    INLINE_CODE = "code"
    LINK_DESTINATION = "link"


# Order matches the dialect's reference list; membership is what matters.
PLAIN_RESERVED: Final[frozenset[str]] = frozenset("_*[]()~`>#+-=|{}.!\\")
CODE_RESERVED: Final[frozenset[str]] = frozenset("\\`")
LINK_RESERVED: Final[frozenset[str]] = frozenset("\\)`")

_RESERVED_BY_ZONE: Final[dict[MarkupZone, frozenset[str]]] = {
    MarkupZone.PLAIN_TEXT: PLAIN_RESERVED,
    MarkupZone.INLINE_CODE: CODE_RESERVED,
    MarkupZone.LINK_DESTINATION: LINK_RESERVED,
}


def _escape_chars(text: str, reserved: frozenset[str]) -> str:
    return "".join("\\" + c if c in reserved else c for c in text)


def escape_plain(text: str) -> str:
    """Escape ``text`` for use as plain message text.

    Args:
        text: Raw text.

    Returns:
        The text with a backslash before each of the 19 reserved characters.

    Example:
        >>> escape_plain("v1.2 (beta)!")
        'v1\\\\.2 \\\\(beta\\\\)\\\\!'
    """
    return _escape_chars(text, PLAIN_RESERVED)


def escape_code(text: str) -> str:
    """Escape ``text`` for use inside an inline code span or code block.

    Only backslash and backtick are escaped; all other punctuation renders
    literally inside code.
    """
    return _escape_chars(text, CODE_RESERVED)


def escape_link_destination(text: str) -> str:
    """Escape ``text`` for use as the destination of an inline link."""
    return _escape_chars(text, LINK_RESERVED)


def escape(text: str, zone: MarkupZone = MarkupZone.PLAIN_TEXT) -> str:
    """Escape ``text`` for the given markup zone.

    Args:
        text: Raw text.
        zone: Destination zone of the text.

    Returns:
        The escaped text.
    """
    return _escape_chars(text, _RESERVED_BY_ZONE[zone])


def unescape_plain(text: str) -> str:
    """Reverse [`escape_plain`][logmark.core.escape.escape_plain].

    Removes one backslash in front of each reserved character. A backslash that
    precedes a non-reserved character, or ends the string, is kept.

    Args:
        text: Text escaped for the plain-text zone.

    Returns:
        The original display text.
    """
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        c = text[i]
        if c == "\\" and i + 1 < n and text[i + 1] in PLAIN_RESERVED:
            out.append(text[i + 1])
            i += 2
            continue
        out.append(c)
        i += 1
    return "".join(out)
