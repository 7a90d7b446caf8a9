# topmark:header:start
#
#   project      : LogMark
#   file         : __init__.py
#   file_relpath : src/logmark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LogMark CLI package.

This package groups all Click command definitions and supporting utilities
for the LogMark command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        logmark = "logmark.cli.main:cli"
"""
