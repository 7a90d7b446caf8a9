# topmark:header:start
#
#   project      : LogMark
#   file         : options.py
#   file_relpath : src/logmark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Click-based LogMark frontend.

This module centralizes reusable options (verbosity, color, input, output
format, config) and their resolution logic, so commands and groups can stay
thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from logmark.cli.cli_types import EnumChoiceParam
from logmark.cli.errors import LogmarkUsageError
from logmark.cli_shared.color import ColorMode
from logmark.config.logging import TRACE_LEVEL
from logmark.core.formats import OutputFormat

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int | None:
    """Resolve the internal logging level from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level, or None if neither flag was given.

    Raises:
        LogmarkUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set CRITICAL level.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise LogmarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.CRITICAL
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase internal logging on stderr. Repeat for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Silence internal logging.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def input_argument(f: Callable[P, R]) -> Callable[P, R]:
    """Add an optional ``PATH`` argument; ``-`` or no value reads STDIN."""
    return click.argument(
        "path",
        required=False,
        default="-",
        metavar="[PATH|-]",
    )(f)


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--format`` for the drained messages (defaults to the config value)."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)


def config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` (repeatable) and ``--no-config``."""
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        type=click.Path(dir_okay=False),
        help="Additional TOML config file(s), applied after local config files.",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        default=False,
        help="Ignore logmark.toml and [tool.logmark] in pyproject.toml.",
    )(f)
    return f
