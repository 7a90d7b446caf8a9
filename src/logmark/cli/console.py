# topmark:header:start
#
#   project      : LogMark
#   file         : console.py
#   file_relpath : src/logmark/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal console for the `logmark` command.

Drained messages go to stdout; warnings and errors go to stderr. Internal
logging is configured separately (see `logmark.config.logging`) and never
passes through this console.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click

from logmark.cli_shared.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """`ConsoleLike` writing to the process streams with `click.echo`.

    Streams default to ``sys.stdout``/``sys.stderr`` looked up at write time, so
    Click's test runner can substitute them.

    Args:
        enable_color (bool): Keep ANSI styles; when False, styles are stripped.
        out (TextIO | None): Stream for regular output.
        err (TextIO | None): Stream for warnings and errors.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out
        self.err = err

    def _echo(self, text: str, *, nl: bool, diagnostic: bool, fg: str | None = None) -> None:
        stream: TextIO = (self.err or sys.stderr) if diagnostic else (self.out or sys.stdout)
        if fg is not None:
            text = self.styled(text, fg=fg)
        click.echo(text, nl=nl, file=stream, color=self.enable_color)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to stdout."""
        self._echo(text, nl=nl, diagnostic=False)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a yellow warning to stderr."""
        self._echo(text, nl=nl, diagnostic=True, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write a bright red error to stderr."""
        self._echo(text, nl=nl, diagnostic=True, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style` (unchanged if color is off).

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Keyword arguments for `click.style`
                (``fg``, ``bold``, ``underline``...).

        Returns:
            str: The styled text.
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
