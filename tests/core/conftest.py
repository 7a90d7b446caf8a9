# topmark:header:start
#
#   project      : LogMark
#   file         : conftest.py
#   file_relpath : tests/core/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fixtures shared by the core tests."""

from __future__ import annotations

import pytest

from logmark.core.collector import LogCollector


@pytest.fixture
def collector() -> LogCollector:
    """Return a fresh, empty collector."""
    return LogCollector()


@pytest.fixture
def collector_factory() -> type[LogCollector]:
    """Return the collector class, for tests that need several buffers."""
    return LogCollector
