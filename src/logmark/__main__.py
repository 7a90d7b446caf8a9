# topmark:header:start
#
#   project      : LogMark
#   file         : __main__.py
#   file_relpath : src/logmark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running LogMark via ``python -m logmark``.

It delegates directly to :func:`logmark.cli.main.cli`, so the module interface and
the ``logmark`` console script share a single entry point.

Examples:
    Capture the output of another tool::

        some-tool 2>&1 | python -m logmark capture -
"""

from __future__ import annotations

from logmark.cli.main import cli

if __name__ == "__main__":
    cli()
