# topmark:header:start
#
#   project      : LogMark
#   file         : __init__.py
#   file_relpath : src/logmark/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-free helpers shared by LogMark frontends (console protocol, color)."""
