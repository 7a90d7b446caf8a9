# topmark:header:start
#
#   project      : LogMark
#   file         : io.py
#   file_relpath : src/logmark/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input reading for Click commands.

Commands accept a single ``PATH`` argument, where ``-`` means STDIN. Filesystem
and decoding failures are translated into the CLI error hierarchy so that each
maps to its own exit code.
"""

from __future__ import annotations

from pathlib import Path

import click

from logmark.cli.errors import (
    LogmarkEncodingError,
    LogmarkFileNotFoundError,
    LogmarkIOError,
    LogmarkPermissionDeniedError,
)
from logmark.config.logging import LogmarkLogger, get_logger

logger: LogmarkLogger = get_logger(__name__)

STDIN_SENTINEL: str = "-"


def read_input_text(path: str | None, *, encoding: str = "utf-8") -> str:
    """Return the text of ``path``, or of STDIN for ``-``/None.

    Args:
        path: File path, ``-`` or None.
        encoding: Text encoding of the input file.

    Returns:
        The full input text.

    Raises:
        LogmarkFileNotFoundError: If the path does not exist or is a directory.
        LogmarkPermissionDeniedError: If the file cannot be opened for reading.
        LogmarkEncodingError: If the content is not valid text in ``encoding``.
        LogmarkIOError: On any other I/O failure.
    """
    if path is None or path == STDIN_SENTINEL:
        logger.debug("Reading input from STDIN")
        return click.get_text_stream("stdin").read()

    file_path = Path(path)
    logger.debug("Reading input from %s", file_path)
    try:
        return file_path.read_text(encoding=encoding)
    except (FileNotFoundError, IsADirectoryError) as e:
        raise LogmarkFileNotFoundError(f"No such file: {path}") from e
    except PermissionError as e:
        raise LogmarkPermissionDeniedError(f"Permission denied: {path}") from e
    except UnicodeDecodeError as e:
        raise LogmarkEncodingError(f"Cannot decode {path} as {encoding}: {e.reason}") from e
    except OSError as e:
        raise LogmarkIOError(f"Cannot read {path}: {e}") from e


def split_input_lines(text: str) -> list[str]:
    """Split ``text`` into lines, dropping the final line ending only.

    Blank lines inside the text are kept, so the captured log preserves the
    blank-line structure of the input.
    """
    if not text:
        return []
    return text.splitlines()


def strip_final_newline(text: str) -> str:
    """Remove one trailing ``\\r\\n`` or ``\\n`` from ``text``."""
    for ending in ("\r\n", "\n"):
        if text.endswith(ending):
            return text[: -len(ending)]
    return text
