# topmark:header:start
#
#   project      : LogMark
#   file         : code_block.py
#   file_relpath : src/logmark/core/code_block.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fenced code-block rendering for arbitrary values.

[`CodeBlock`][logmark.core.code_block.CodeBlock] wraps any value so that it can be
interpolated into an already-escaped message:

- ``str(CodeBlock(value))`` renders the display form (``str(value)``) in an
  untagged block;
- ``repr(CodeBlock(value))`` renders the structured form in a block tagged
  ``json``. The structured form is the JSON rendering of the value when it is
  JSON-serializable, and ``repr(value)`` otherwise.

In both cases the content is escaped for the code zone only, so that markup
metacharacters inside the block render literally.
"""

from __future__ import annotations

import json
from typing import Final, Generic, TypeVar

from logmark.core.escape import escape_code

T = TypeVar("T")

FENCE: Final[str] = "```"
STRUCTURED_LANGUAGE: Final[str] = "json"


def _structured_text(value: object) -> str:
    try:
        return json.dumps(value, indent=2, ensure_ascii=False)
    except (TypeError, ValueError):
        # Not JSON-serializable (or circular): use the debug representation.
        return repr(value)


def fence(content: str, *, language: str = "") -> str:
    """Wrap already-escaped ``content`` in a fenced code block.

    Args:
        content: Text escaped for the code zone.
        language: Optional language tag placed after the opening fence.

    Returns:
        The block, with both fences on their own lines.
    """
    return f"{FENCE}{language}\n{content}\n{FENCE}"


def render_code_block(value: object, *, structured: bool = False) -> str:
    """Render ``value`` as a fenced code block.

    Args:
        value: Any value.
        structured: If True, render the structured (debug) form tagged ``json``
            instead of the display form.

    Returns:
        The markup-safe code block.
    """
    if structured:
        return fence(escape_code(_structured_text(value)), language=STRUCTURED_LANGUAGE)
    return fence(escape_code(str(value)))


class CodeBlock(Generic[T]):
    """Formatting adapter rendering a value as a fenced code block.

    Example:
        >>> collector.println_escaped(f"Result:\\n{CodeBlock(payload)!r}")
    """

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value: T = value

    def __str__(self) -> str:
        """Return the display form of the wrapped value in a code block."""
        return render_code_block(self.value)

    def __repr__(self) -> str:
        """Return the structured form of the wrapped value in a ``json`` block."""
        return render_code_block(self.value, structured=True)
