# topmark:header:start
#
#   project      : LogMark
#   file         : constants.py
#   file_relpath : src/logmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LogMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

LOGMARK_TOOL_NAME: str = "logmark"

LOGMARK_VERSION: str = get_version("logmark")

# Config file names looked up in the working directory:
LOGMARK_TOML_NAME: str = "logmark.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Section holding LogMark settings inside pyproject.toml:
PYPROJECT_SECTION: tuple[str, ...] = ("tool", "logmark")

# Environment variable overriding the internal log level:
LOG_LEVEL_ENV_VAR: str = "LOGMARK_LOG_LEVEL"
