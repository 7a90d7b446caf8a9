# topmark:header:start
#
#   project      : LogMark
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for internal logging setup."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import pytest

from logmark.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    get_logger,
    parse_log_level,
    resolve_env_log_level,
    setup_logging,
)
from logmark.constants import LOG_LEVEL_ENV_VAR
from tests.conftest import parametrize

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Restore the session-wide TRACE setup after a test reconfigures logging."""
    yield
    setup_logging(level=TRACE_LEVEL)


@parametrize(
    "value, expected",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("10", 10),
        ("loud", None),
    ],
)
def test_parse_log_level(value: str, expected: int | None) -> None:
    """Names are case-insensitive; numbers pass through."""
    assert parse_log_level(value) == expected


def test_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """The environment variable is honored when set."""
    assert resolve_env_log_level() is None
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "INFO")
    assert resolve_env_log_level() == logging.INFO


def test_setup_logging_defaults_to_critical(restore_logging: None) -> None:
    """Without level or env, internal logging stays quiet and goes to stderr."""
    setup_logging()
    root = logging.getLogger()
    assert root.level == logging.CRITICAL
    assert len(root.handlers) == 1
    handler = root.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stderr
    assert isinstance(handler.formatter, ChalkFormatter)


def test_logger_has_trace() -> None:
    """Loggers obtained through `get_logger` support TRACE."""
    logger = get_logger("logmark.tests")
    assert hasattr(logger, "trace")
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_trace_records(caplog: pytest.LogCaptureFixture) -> None:
    """TRACE records are emitted when the level allows them."""
    with caplog.at_level(TRACE_LEVEL, logger="logmark.tests"):
        get_logger("logmark.tests").trace("hello %s", "trace")
    assert "hello trace" in caplog.text
