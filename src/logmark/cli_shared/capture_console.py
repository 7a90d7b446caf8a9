# topmark:header:start
#
#   project      : LogMark
#   file         : capture_console.py
#   file_relpath : src/logmark/cli_shared/capture_console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console that captures output into a log collector.

Command code written against [`ConsoleLike`][logmark.cli_shared.console_api.ConsoleLike]
can be pointed at a [`CollectorConsole`][logmark.cli_shared.capture_console.CollectorConsole]
instead of a terminal console. Every call then becomes one collector entry:

- ``print`` goes through the escaping print, or the pre-escaped print when the
  console was created with ``escaped=True``;
- ``warn`` and ``error`` go through the diagnostic print (always escaped);
- ``styled`` is a no-op, since terminal styles have no meaning in markup.

The ``nl`` flag is accepted for compatibility; entry boundaries replace line
endings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from logmark.cli_shared.console_api import ConsoleLike

if TYPE_CHECKING:
    from logmark.core.collector import LogCollector


class CollectorConsole(ConsoleLike):
    """`ConsoleLike` adapter writing into a [`LogCollector`][logmark.core.collector.LogCollector].

    Args:
        collector (LogCollector): Buffer of the current execution context.
        escaped (bool): If True, ``print`` treats its text as valid markup.
    """

    def __init__(self, collector: LogCollector, *, escaped: bool = False) -> None:
        self.collector = collector
        self.escaped = escaped

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Capture a regular message."""
        if self.escaped:
            self.collector.println_escaped(text)
        else:
            self.collector.println(text)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Capture a warning message."""
        self.collector.eprintln(text)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Capture an error message."""
        self.collector.eprintln(text)

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return ``text`` unchanged."""
        return text
