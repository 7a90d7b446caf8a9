# topmark:header:start
#
#   project      : LogMark
#   file         : console_helpers.py
#   file_relpath : src/logmark/cli/console_helpers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Utilities for obtaining the program-output console of the active Click context."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from logmark.cli.console import ClickConsole

if TYPE_CHECKING:
    from logmark.cli_shared.console_api import ConsoleLike


def get_console_safely() -> ConsoleLike:
    """Return a ConsoleLike using the active Click context when available.

    If an active Click context exists and a console instance is stored in
    ``ctx.obj["console"]``, that console is returned. Otherwise a colorless
    [`ClickConsole`][logmark.cli.console.ClickConsole] is returned, so helpers
    can be called outside a command (e.g., from tests).
    """
    ctx = click.get_current_context(silent=True)
    if ctx is not None and isinstance(getattr(ctx, "obj", None), dict) and "console" in ctx.obj:
        console: ConsoleLike = ctx.obj["console"]
        return console
    return ClickConsole(enable_color=False)
