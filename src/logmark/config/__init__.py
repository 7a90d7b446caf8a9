# topmark:header:start
#
#   project      : LogMark
#   file         : __init__.py
#   file_relpath : src/logmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging setup for LogMark.

- [`logmark.config.logging`][logmark.config.logging]: internal diagnostics
  (TRACE level, colored formatter).
- [`logmark.config.settings`][logmark.config.settings]: TOML-backed runtime
  settings for the command-line frontend.
"""

from __future__ import annotations

from logmark.config.settings import (
    ConfigError,
    LogmarkConfig,
    MutableLogmarkConfig,
    load_config,
    to_toml,
)

__all__ = [
    "ConfigError",
    "LogmarkConfig",
    "MutableLogmarkConfig",
    "load_config",
    "to_toml",
]
