# topmark:header:start
#
#   project      : LogMark
#   file         : collector.py
#   file_relpath : src/logmark/core/collector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-context log buffer for captured program output.

A [`LogCollector`][logmark.core.collector.LogCollector] replaces the terminal for
one execution context (one command invocation, one handled request). Messages
are sanitized on the way in and kept in insertion order until the context ends
and the caller drains them for delivery.

Entry points:

- [`println`][logmark.core.collector.LogCollector.println] and
  [`eprintln`][logmark.core.collector.LogCollector.eprintln]: text that has not
  been escaped yet.
- [`println_escaped`][logmark.core.collector.LogCollector.println_escaped]: text
  that already is valid markup (tables, code blocks, hand-placed emphasis).

A collector is not thread-safe and must never be shared between concurrent
contexts: [`drain_logs`][logmark.core.collector.LogCollector.drain_logs] is a
destructive read.
"""

from __future__ import annotations

from logmark.config.logging import LogmarkLogger, get_logger
from logmark.core.ansi import strip_control_sequences
from logmark.core.escape import escape_plain

logger: LogmarkLogger = get_logger(__name__)


def format_args(args: tuple[object, ...], sep: str = " ") -> str:
    """Join ``str()`` of each argument with ``sep``, the way ``print`` does."""
    return sep.join(str(arg) for arg in args)


class LogCollector:
    """Ordered, drain-once buffer of markup-safe messages.

    Attributes:
        entries (tuple[str, ...]): Snapshot of the pending messages.
    """

    __slots__ = ("_logs",)

    def __init__(self) -> None:
        self._logs: list[str] = []

    def log(self, message: str, escape_markup: bool) -> None:
        """Sanitize ``message`` and append it to the buffer.

        Control sequences are always stripped. If ``escape_markup`` is True the
        result is additionally escaped as plain markup text.

        Args:
            message: The formatted message. An empty string is a valid entry.
            escape_markup: Whether to escape the message for the plain-text zone.
        """
        text = strip_control_sequences(message)
        if escape_markup:
            text = escape_plain(text)
        self._logs.append(text)
        logger.trace("Collected entry #%d (escaped=%s)", len(self._logs), escape_markup)

    def drain_logs(self) -> list[str]:
        """Return all buffered messages in insertion order and empty the buffer.

        Returns:
            list[str]: The drained messages; an empty list if nothing is pending.
        """
        drained, self._logs = self._logs, []
        logger.debug("Drained %d log entries", len(drained))
        return drained

    def println(self, *args: object, sep: str = " ") -> None:
        """Log the arguments as one escaped message.

        With no arguments an empty message is logged, which keeps blank lines in
        the rendered output.
        """
        self.log(format_args(args, sep), True)

    def eprintln(self, *args: object, sep: str = " ") -> None:
        """Log a diagnostic message; same semantics as ``println``.

        Diagnostics share the buffer with regular output so the receiver sees
        both streams in the order they were produced.
        """
        self.log(format_args(args, sep), True)

    def println_escaped(self, *args: object, sep: str = " ") -> None:
        """Log the arguments as one message that is already valid markup."""
        self.log(format_args(args, sep), False)

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._logs)

    def __len__(self) -> int:
        return len(self._logs)

    def __bool__(self) -> bool:
        return bool(self._logs)

    def __repr__(self) -> str:
        return f"LogCollector(pending={len(self._logs)})"
