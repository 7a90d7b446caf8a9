# topmark:header:start
#
#   project      : LogMark
#   file         : table.py
#   file_relpath : src/logmark/core/table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tabular output flattened into the markup dialect.

Messaging surfaces cannot render column-aligned tables, so each row is
flattened into a single line. Cells are consumed in chunks of three, and each
position in a chunk has a fixed role:

| position | role       | rendering            |
| -------- | ---------- | -------------------- |
| 1        | key        | ``*key*`` (bold)     |
| 2        | value      | verbatim             |
| 3        | annotation | ``_note_`` (italic)  |

A cell that is empty, or that already starts with a backtick (a code span), is
never wrapped: emphasis may not be nested with code in the dialect. Missing
cells of a short final chunk count as empty. All role strings of a row are
joined with ``" : "`` after dropping empty or whitespace-only segments, and rows
are separated by a blank line.

The layout is a fixed contract with the rendering surface.

Cells are expected to be escaped already; pass ``escape_cells=True`` to escape
raw cell text as plain markup before it is wrapped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from logmark.config.logging import LogmarkLogger, get_logger
from logmark.core.ansi import strip_control_sequences
from logmark.core.escape import escape_plain

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from logmark.core.collector import LogCollector

logger: LogmarkLogger = get_logger(__name__)

CHUNK_SIZE: Final[int] = 3
SEGMENT_SEPARATOR: Final[str] = " : "
ROW_SEPARATOR: Final[str] = "\n\n"
CODE_SPAN_DELIMITER: Final[str] = "`"

# Emphasis marker per position within a chunk (key, value, annotation).
_ROLE_MARKERS: Final[tuple[str, ...]] = ("*", "", "_")


@dataclass(frozen=True)
class Cell:
    """Table cell with an explicit "already formatted" flag.

    Plain ``str`` cells infer the flag from a leading backtick; a ``Cell`` states
    it instead.

    Attributes:
        text: Cell content.
        preformatted: If True, the content is emitted untouched (no emphasis,
            no escaping).
    """

    text: str
    preformatted: bool = False


CellLike = str | Cell


def _coerce(cell: CellLike) -> tuple[str, bool]:
    if isinstance(cell, Cell):
        return cell.text, cell.preformatted
    return cell, cell.startswith(CODE_SPAN_DELIMITER)


def _render_role(cell: CellLike, marker: str, *, escape_cells: bool) -> str:
    text, preformatted = _coerce(cell)
    if not text or preformatted:
        return text
    if escape_cells:
        # Strip first: escaping "[" would hide a sequence from the collector.
        text = escape_plain(strip_control_sequences(text))
    return f"{marker}{text}{marker}"


def _chunks(row: Sequence[CellLike]) -> Iterator[tuple[CellLike, ...]]:
    for start in range(0, len(row), CHUNK_SIZE):
        chunk = tuple(row[start : start + CHUNK_SIZE])
        yield chunk + ("",) * (CHUNK_SIZE - len(chunk))


def render_row(row: Sequence[CellLike], *, escape_cells: bool = False) -> str:
    """Flatten one row into a single ``" : "``-separated line.

    Args:
        row: The row's cells.
        escape_cells: Escape non-preformatted cells as plain markup first.

    Returns:
        The flattened row; an empty string if every segment is blank.
    """
    segments: list[str] = [
        _render_role(cell, marker, escape_cells=escape_cells)
        for chunk in _chunks(row)
        for cell, marker in zip(chunk, _ROLE_MARKERS)
    ]
    return SEGMENT_SEPARATOR.join(s for s in segments if s.strip())


def render_table(rows: Iterable[Sequence[CellLike]], *, escape_cells: bool = False) -> str:
    """Render a grid of cells as flattened markup lines.

    Args:
        rows: Rows of cells. Rows may have different lengths.
        escape_cells: Escape non-preformatted cells as plain markup first.

    Returns:
        The rendered rows separated by blank lines.

    Example:
        >>> render_table([["Name", "Alice", "admin"], ["Role", "Op"]])
        '*Name* : Alice : _admin_\\n\\n*Role* : Op'
    """
    lines: list[str] = [render_row(row, escape_cells=escape_cells) for row in rows]
    logger.trace("Rendered table with %d row(s)", len(lines))
    return ROW_SEPARATOR.join(lines)


def print_table(
    collector: LogCollector,
    rows: Iterable[Sequence[CellLike]],
    *,
    escape_cells: bool = False,
) -> None:
    """Render ``rows`` and log the result as one pre-escaped entry.

    Args:
        collector: Buffer of the current execution context.
        rows: Rows of cells.
        escape_cells: Escape non-preformatted cells as plain markup first.
    """
    collector.println_escaped(render_table(rows, escape_cells=escape_cells))
