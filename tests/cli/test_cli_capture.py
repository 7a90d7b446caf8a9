# topmark:header:start
#
#   project      : LogMark
#   file         : test_cli_capture.py
#   file_relpath : tests/cli/test_cli_capture.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `capture` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from logmark.core.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_capture_stdin_one_message_per_line(isolation: Path) -> None:
    """Each line is escaped and emitted as its own message."""
    result = run_cli(["capture"], input_text="hello.\n\nworld!\n")
    assert_SUCCESS(result)
    assert result.stdout == "hello\\.\n\n\n\nworld\\!\n"


@mark_cli
def test_capture_raw(isolation: Path) -> None:
    """`--raw` trusts the input to be markup already."""
    result = run_cli(["capture", "--raw", "-"], input_text="*bold* `x`\n")
    assert_SUCCESS(result)
    assert result.stdout == "*bold* `x`\n"


@mark_cli
def test_capture_whole(isolation: Path) -> None:
    """`--whole` captures the entire input as one message."""
    result = run_cli(["capture", "--whole"], input_text="a.\nb.\n")
    assert_SUCCESS(result)
    assert result.stdout == "a\\.\nb\\.\n"


@mark_cli
def test_capture_strips_control_sequences(isolation: Path) -> None:
    """Terminal styling never reaches the messages."""
    result = run_cli(["capture", "--format", "json"], input_text="\x1b[32mok\x1b[0m\n")
    assert_SUCCESS(result)
    assert json.loads(result.stdout)["messages"] == ["ok"]


@mark_cli
def test_capture_file_json(tmp_path: Path) -> None:
    """A file argument is read and emitted as a JSON envelope."""
    (tmp_path / "log.txt").write_text("step 1.\nstep 2!\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["capture", "log.txt", "--format", "json"])
    assert_SUCCESS(result)
    data = json.loads(result.stdout)
    assert data["meta"]["tool"] == "logmark"
    assert data["messages"] == ["step 1\\.", "step 2\\!"]


@mark_cli
def test_capture_ndjson(isolation: Path) -> None:
    """NDJSON emits one indexed record per message."""
    result = run_cli(["capture", "--format", "ndjson"], input_text="a\nb\n")
    assert_SUCCESS(result)
    records = [json.loads(line) for line in result.stdout.splitlines()]
    assert [r["message"] for r in records] == [
        {"index": 0, "text": "a"},
        {"index": 1, "text": "b"},
    ]


@mark_cli
def test_capture_empty_input(isolation: Path) -> None:
    """No input produces no output."""
    result = run_cli(["capture"], input_text="")
    assert_SUCCESS(result)
    assert result.stdout == ""


@mark_cli
def test_capture_honors_local_config(tmp_path: Path) -> None:
    """`logmark.toml` in the working directory sets the defaults."""
    (tmp_path / "logmark.toml").write_text(
        "escape = false\nsplit_lines = false\n", encoding="utf-8"
    )
    result = run_cli_in(tmp_path, ["capture"], input_text="*a*\n*b*\n")
    assert_SUCCESS(result)
    assert result.stdout == "*a*\n*b*\n"

    result = run_cli_in(tmp_path, ["capture", "--no-config"], input_text="*a*\n")
    assert_SUCCESS(result)
    assert result.stdout == "\\*a\\*\n"


@mark_cli
def test_capture_flags_override_config(tmp_path: Path) -> None:
    """Command-line flags win over config files."""
    (tmp_path / "logmark.toml").write_text("escape = false\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["capture", "--escape"], input_text="*a*\n")
    assert_SUCCESS(result)
    assert result.stdout == "\\*a\\*\n"


@mark_cli
def test_capture_conflicting_flags(isolation: Path) -> None:
    """Opposite flags are a usage error."""
    result = run_cli(["capture", "--raw", "--escape"], input_text="x\n")
    assert result.exit_code == ExitCode.USAGE_ERROR


@mark_cli
def test_capture_missing_file(isolation: Path) -> None:
    """A missing input file maps to its own exit code."""
    result = run_cli(["capture", "nope.txt"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND


@mark_cli
def test_capture_invalid_config(tmp_path: Path) -> None:
    """An invalid config file is a configuration error."""
    (tmp_path / "logmark.toml").write_text("escape = 'maybe'\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["capture"], input_text="x\n")
    assert result.exit_code == ExitCode.CONFIG_ERROR
