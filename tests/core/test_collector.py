# topmark:header:start
#
#   project      : LogMark
#   file         : test_collector.py
#   file_relpath : tests/core/test_collector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the per-context log buffer."""

from __future__ import annotations

from logmark.core.collector import LogCollector, format_args
from logmark.core.escape import escape_plain


def test_empty_message_is_logged(collector: LogCollector) -> None:
    """An empty message is a valid entry; a second drain is empty."""
    collector.log("", True)
    assert collector.drain_logs() == [""]
    assert collector.drain_logs() == []


def test_drain_preserves_order_and_escaping(collector: LogCollector) -> None:
    """Entries keep insertion order and their own escaping mode."""
    collector.log("a.b", True)
    collector.log("*b*", False)
    assert collector.drain_logs() == [escape_plain("a.b"), "*b*"]
    assert collector.drain_logs() == []


def test_log_always_strips_control_sequences(collector: LogCollector) -> None:
    """Control sequences are removed in both modes."""
    collector.log("\x1b[31mfail.\x1b[0m", True)
    collector.log("\x1b[1m*bold*\x1b[0m", False)
    assert collector.drain_logs() == ["fail\\.", "*bold*"]


def test_println_formats_like_print(collector: LogCollector) -> None:
    """Arguments are joined with the separator and escaped."""
    collector.println("Deployed", 3, "services (v1.2)")
    collector.println("a", "b", sep="-")
    assert collector.drain_logs() == ["Deployed 3 services \\(v1\\.2\\)", "a\\-b"]


def test_eprintln_shares_the_buffer(collector: LogCollector) -> None:
    """Diagnostics are escaped and interleaved with regular output."""
    collector.println("out")
    collector.eprintln("err!")
    collector.println("more")
    assert collector.drain_logs() == ["out", "err\\!", "more"]


def test_println_escaped_is_verbatim(collector: LogCollector) -> None:
    """Pre-escaped text is not escaped again."""
    collector.println_escaped("*Status*", ":", "`ok`")
    assert collector.drain_logs() == ["*Status* : `ok`"]


def test_prints_without_arguments_log_empty_entries(collector: LogCollector) -> None:
    """Each print with no arguments appends an empty entry."""
    collector.println()
    collector.eprintln()
    collector.println_escaped()
    assert collector.drain_logs() == ["", "", ""]


def test_read_only_helpers(collector: LogCollector) -> None:
    """`len`, truthiness and `entries` reflect pending messages only."""
    assert not collector
    assert len(collector) == 0
    collector.println("x")
    collector.println("y")
    snapshot = collector.entries
    assert snapshot == ("x", "y")
    assert len(collector) == 2
    assert collector
    assert repr(collector) == "LogCollector(pending=2)"
    collector.drain_logs()
    assert snapshot == ("x", "y")
    assert collector.entries == ()


def test_collectors_are_independent() -> None:
    """Two collectors never see each other's messages."""
    first, second = LogCollector(), LogCollector()
    first.println("one")
    second.println("two")
    assert first.drain_logs() == ["one"]
    assert second.drain_logs() == ["two"]


def test_format_args() -> None:
    """`format_args` mirrors `print()` joining."""
    assert format_args((1, None, "x")) == "1 None x"
    assert format_args((), ", ") == ""
