# topmark:header:start
#
#   project      : LogMark
#   file         : cmd_common.py
#   file_relpath : src/logmark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands:
resolving the configuration, creating the execution context for one
invocation, and draining it to the console.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from logmark.cli.console_helpers import get_console_safely
from logmark.cli.emitters import emit_messages
from logmark.cli.errors import LogmarkConfigError
from logmark.config.logging import LogmarkLogger, get_logger
from logmark.config.settings import ConfigError, load_config
from logmark.core.context import ExecutionContext

if TYPE_CHECKING:
    from collections.abc import Sequence

    from logmark.config.settings import LogmarkConfig
    from logmark.core.formats import OutputFormat

logger: LogmarkLogger = get_logger(__name__)


def resolve_command_config(
    *,
    config_paths: Sequence[str] = (),
    no_config: bool = False,
    **overrides: object,
) -> LogmarkConfig:
    """Resolve the configuration for the current command.

    Raises:
        LogmarkConfigError: If a config file is unreadable or invalid.
    """
    try:
        return load_config(config_paths=config_paths, use_local=not no_config, **overrides)
    except ConfigError as e:
        raise LogmarkConfigError(str(e)) from e


def new_execution_context(config: LogmarkConfig) -> ExecutionContext:
    """Create the execution context for this invocation and remember it on ``ctx.obj``."""
    exec_ctx = ExecutionContext.create(config)
    click_ctx = click.get_current_context(silent=True)
    if click_ctx is not None and isinstance(click_ctx.obj, dict):
        click_ctx.obj["execution_context"] = exec_ctx
    return exec_ctx


def drain_and_emit(exec_ctx: ExecutionContext, fmt: OutputFormat | None = None) -> int:
    """Drain ``exec_ctx`` and write its messages to the program-output console.

    Args:
        exec_ctx: The context of this invocation.
        fmt: Output format; defaults to ``exec_ctx.config.output_format``.

    Returns:
        int: The number of emitted messages.
    """
    messages: list[str] = exec_ctx.drain_logs()
    emit_messages(get_console_safely(), messages, fmt or exec_ctx.config.output_format)
    logger.info("Emitted %d message(s)", len(messages))
    return len(messages)
