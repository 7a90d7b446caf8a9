# topmark:header:start
#
#   project      : LogMark
#   file         : errors.py
#   file_relpath : src/logmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the LogMark CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. The capture core never raises; only input reading
    and configuration can fail.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from logmark.core.exit_codes import ExitCode


class LogmarkError(click.ClickException):
    """Base class for all LogMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class LogmarkUsageError(LogmarkError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class LogmarkConfigError(LogmarkError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class LogmarkFileNotFoundError(LogmarkError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class LogmarkPermissionDeniedError(LogmarkError):
    """Error for insufficient permissions reading input."""

    exit_code = ExitCode.PERMISSION_DENIED


class LogmarkIOError(LogmarkError):
    """Error for I/O errors reading input."""

    exit_code = ExitCode.IO_ERROR


class LogmarkEncodingError(LogmarkError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR
