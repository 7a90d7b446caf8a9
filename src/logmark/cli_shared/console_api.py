# topmark:header:start
#
#   project      : LogMark
#   file         : console_api.py
#   file_relpath : src/logmark/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic console interface for program output.

This protocol defines the small surface used by commands to emit user-facing
output, separate from internal logging. Implementations either write to the
process streams ([`ClickConsole`][logmark.cli.console.ClickConsole]) or capture
into a log buffer ([`CollectorConsole`][logmark.cli_shared.capture_console.CollectorConsole]).
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """Minimal interface for a console used by commands."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to the regular output."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to the diagnostic output."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to the diagnostic output."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...
