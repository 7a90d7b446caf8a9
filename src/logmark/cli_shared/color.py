# topmark:header:start
#
#   project      : LogMark
#   file         : color.py
#   file_relpath : src/logmark/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent color helpers for LogMark.

Color only ever applies to what the CLI writes to a terminal. Captured messages
are never styled, and machine formats are always colorless.
"""

from __future__ import annotations

import os
import sys
from enum import Enum

from logmark.config.logging import LogmarkLogger, get_logger
from logmark.core.formats import OutputFormat, is_machine_format

logger: LogmarkLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    output_format: OutputFormat | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Machine formats**: JSON and NDJSON never use color.
        2. **CLI override**: `ALWAYS` → True; `NEVER` → False.
        3. **Environment**: `FORCE_COLOR` (set and not ``"0"``) → True;
           `NO_COLOR` (set to any value) → False.
        4. **Auto**: `stdout.isatty()`.

    Args:
        color_mode_override: Parsed `ColorMode` value from `--color`;
            `None` means "not provided".
        output_format: Selected output format, if any.
        stdout_isatty: Optional override for TTY detection. When `None`, the function
            calls `sys.stdout.isatty()` and falls back to `False` on error.

    Returns:
        True if ANSI color should be enabled; False otherwise.
    """
    if is_machine_format(output_format):
        return False

    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)
