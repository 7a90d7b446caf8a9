# topmark:header:start
#
#   project      : LogMark
#   file         : __init__.py
#   file_relpath : src/logmark/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives of LogMark.

The ``logmark.core`` package holds the output-capture layer itself. Modules here
are pure and synchronous, and never import Click or a console.

Included modules:

- ``ansi``
  Removal of terminal control sequences (CSI escape codes) from text.

- ``escape``
  Backslash escaping for the MarkdownV2-style markup dialect, one function
  per syntactic zone (plain text, inline code, link destination).

- ``code_block``
  Wrapping arbitrary values in fenced code blocks.

- ``collector``
  The per-context log buffer and its print-style entry points.

- ``table``
  Flattening a grid of cells into the 3-cells-per-chunk markup layout.

- ``context``
  The execution context that owns exactly one collector.

- ``formats`` / ``machine`` / ``exit_codes``
  Shared output vocabulary used by frontends.
"""

from __future__ import annotations
