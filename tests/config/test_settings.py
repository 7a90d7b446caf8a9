# topmark:header:start
#
#   project      : LogMark
#   file         : test_settings.py
#   file_relpath : tests/config/test_settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for layered TOML configuration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest
import tomlkit

from logmark.config import ConfigError, LogmarkConfig, MutableLogmarkConfig, load_config, to_toml
from logmark.core.formats import OutputFormat

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults(tmp_path: Path) -> None:
    """An empty directory yields the built-in defaults."""
    config = load_config(root=tmp_path)
    assert config == LogmarkConfig()
    assert config.escape is True
    assert config.split_lines is True
    assert config.output_format is OutputFormat.MARKDOWN
    assert config.escape_cells is False


def test_precedence(tmp_path: Path) -> None:
    """pyproject < logmark.toml < explicit files < overrides."""
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "x"\n\n[tool.logmark]\nescape = false\noutput_format = "json"\n',
        encoding="utf-8",
    )
    (tmp_path / "logmark.toml").write_text('output_format = "ndjson"\n', encoding="utf-8")
    extra = tmp_path / "extra.toml"
    extra.write_text("split_lines = false\n", encoding="utf-8")

    config = load_config(root=tmp_path, config_paths=[extra], escape_cells=True, escape=None)
    assert config.escape is False
    assert config.output_format is OutputFormat.NDJSON
    assert config.split_lines is False
    assert config.escape_cells is True
    assert config.config_files == (
        str(tmp_path / "pyproject.toml"),
        str(tmp_path / "logmark.toml"),
        str(extra),
    )


def test_use_local_false_skips_discovery(tmp_path: Path) -> None:
    """Local files are ignored when discovery is off."""
    (tmp_path / "logmark.toml").write_text("escape = false\n", encoding="utf-8")
    assert load_config(root=tmp_path, use_local=False).escape is True


def test_pyproject_without_section_is_ignored(tmp_path: Path) -> None:
    """A pyproject without [tool.logmark] contributes nothing."""
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert load_config(root=tmp_path).config_files == ()


def test_invalid_toml_raises(tmp_path: Path) -> None:
    """Malformed TOML is reported with its source."""
    bad = tmp_path / "bad.toml"
    bad.write_text("escape = = true\n", encoding="utf-8")
    with pytest.raises(ConfigError) as excinfo:
        load_config(root=tmp_path, config_paths=[bad])
    assert excinfo.value.source == str(bad)


def test_missing_file_raises(tmp_path: Path) -> None:
    """An explicit config file that does not exist is an error."""
    with pytest.raises(ConfigError):
        load_config(root=tmp_path, config_paths=[tmp_path / "missing.toml"])


def test_wrong_types_raise() -> None:
    """Boolean keys reject non-booleans; formats must be known."""
    builder = MutableLogmarkConfig.from_defaults()
    with pytest.raises(ConfigError):
        builder.merge_table({"escape": "yes"})
    with pytest.raises(ConfigError):
        builder.merge_table({"output_format": "yaml"})


def test_unknown_keys_warn(caplog: pytest.LogCaptureFixture) -> None:
    """Unknown keys are ignored with a warning."""
    builder = MutableLogmarkConfig.from_defaults()
    with caplog.at_level(logging.WARNING):
        builder.merge_table({"colour": True}, source="logmark.toml")
    assert "colour" in caplog.text
    assert builder.freeze() == LogmarkConfig(config_files=("logmark.toml",))


def test_output_format_is_case_insensitive() -> None:
    """Format names are matched case-insensitively."""
    builder = MutableLogmarkConfig.from_defaults()
    builder.merge_table({"output_format": "JSON"})
    assert builder.output_format is OutputFormat.JSON


def test_freeze_thaw_round_trip() -> None:
    """Thawing and freezing gives an equal configuration."""
    config = LogmarkConfig(escape=False, config_files=("a.toml",))
    thawed = config.thaw()
    assert thawed.freeze() == config
    thawed.escape = True
    assert config.escape is False


def test_unknown_override_raises() -> None:
    """Overrides must name a known setting."""
    with pytest.raises(ConfigError):
        MutableLogmarkConfig().apply_overrides(verbose=True)


def test_to_toml_round_trips_values() -> None:
    """The dumped TOML parses back to the same values."""
    config = LogmarkConfig(split_lines=False, output_format=OutputFormat.NDJSON)
    assert tomlkit.parse(to_toml(config)).unwrap() == config.to_dict()

    nested = tomlkit.parse(to_toml(config, for_pyproject=True)).unwrap()
    assert nested["tool"]["logmark"] == config.to_dict()
    assert "[tool.logmark]" in to_toml(config, for_pyproject=True)
