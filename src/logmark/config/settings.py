# topmark:header:start
#
#   project      : LogMark
#   file         : settings.py
#   file_relpath : src/logmark/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML-backed runtime settings for LogMark.

Settings are layered, lowest to highest precedence:

1. built-in defaults ([`LogmarkConfig`][logmark.config.settings.LogmarkConfig]);
2. ``[tool.logmark]`` in ``pyproject.toml`` of the working directory;
3. the top level of ``logmark.toml`` in the working directory;
4. explicit config files, in the order given;
5. overrides from the command line.

Parsing uses `tomlkit`. Configuration follows an immutable/mutable split:
build with [`MutableLogmarkConfig`][logmark.config.settings.MutableLogmarkConfig],
then `freeze()` into a `LogmarkConfig`. To tweak a frozen config, `thaw()` it.

Example ``logmark.toml``:

```toml
escape = true
split_lines = true
output_format = "markdown"
escape_cells = false
```
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from logmark.config.logging import LogmarkLogger, get_logger
from logmark.constants import LOGMARK_TOML_NAME, PYPROJECT_SECTION, PYPROJECT_TOML_NAME
from logmark.core.formats import OutputFormat

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger: LogmarkLogger = get_logger(__name__)

TomlTable = dict[str, Any]


class ConfigError(Exception):
    """Raised for unreadable or malformed configuration.

    Attributes:
        source: The file (or other source label) the error originates from.
    """

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(f"{source}: {message}" if source else message)
        self.source = source


class Key:
    """Canonical TOML keys."""

    ESCAPE: Final[str] = "escape"
    SPLIT_LINES: Final[str] = "split_lines"
    OUTPUT_FORMAT: Final[str] = "output_format"
    ESCAPE_CELLS: Final[str] = "escape_cells"


_BOOL_KEYS: Final[frozenset[str]] = frozenset({Key.ESCAPE, Key.SPLIT_LINES, Key.ESCAPE_CELLS})


def parse_output_format(value: object, *, source: str | None = None) -> OutputFormat:
    """Convert a TOML value to an `OutputFormat` (case-insensitive).

    Raises:
        ConfigError: If ``value`` is not the name of a known format.
    """
    if isinstance(value, OutputFormat):
        return value
    if isinstance(value, str):
        for fmt in OutputFormat:
            if fmt.value == value.strip().lower():
                return fmt
    choices = ", ".join(f.value for f in OutputFormat)
    raise ConfigError(
        f"Invalid value for '{Key.OUTPUT_FORMAT}': {value!r} (expected one of: {choices})",
        source=source,
    )


@dataclass(frozen=True)
class LogmarkConfig:
    """Immutable runtime settings.

    Attributes:
        escape: Escape captured text as plain markup (False: treat it as
            already-escaped markup).
        split_lines: Log one entry per input line instead of one entry per input.
        output_format: Format used to emit drained messages.
        escape_cells: Escape raw table cells before they are wrapped.
        config_files: Config files that contributed to this configuration.
    """

    escape: bool = True
    split_lines: bool = True
    output_format: OutputFormat = OutputFormat.MARKDOWN
    escape_cells: bool = False
    config_files: tuple[str, ...] = ()

    def thaw(self) -> MutableLogmarkConfig:
        """Return a mutable copy of this configuration."""
        return MutableLogmarkConfig(
            escape=self.escape,
            split_lines=self.split_lines,
            output_format=self.output_format,
            escape_cells=self.escape_cells,
            config_files=list(self.config_files),
        )

    def to_dict(self) -> TomlTable:
        """Return the settings as a TOML-compatible table (without provenance)."""
        data = asdict(self)
        data.pop("config_files")
        data[Key.OUTPUT_FORMAT] = self.output_format.value
        return data


@dataclass
class MutableLogmarkConfig:
    """Mutable builder for [`LogmarkConfig`][logmark.config.settings.LogmarkConfig]."""

    escape: bool = True
    split_lines: bool = True
    output_format: OutputFormat = OutputFormat.MARKDOWN
    escape_cells: bool = False
    config_files: list[str] = field(default_factory=list)

    @classmethod
    def from_defaults(cls) -> MutableLogmarkConfig:
        """Return a builder holding the built-in defaults."""
        return cls()

    def merge_table(self, table: Mapping[str, Any], *, source: str | None = None) -> None:
        """Overlay the keys of a TOML table onto this builder.

        Unknown keys are reported as warnings and ignored.

        Args:
            table: Parsed TOML table.
            source: Label used in messages (usually the file path).

        Raises:
            ConfigError: If a known key carries a value of the wrong type.
        """
        for key, value in table.items():
            if key in _BOOL_KEYS:
                if not isinstance(value, bool):
                    raise ConfigError(
                        f"Invalid value for '{key}': expected a boolean, got {value!r}",
                        source=source,
                    )
                setattr(self, key, value)
            elif key == Key.OUTPUT_FORMAT:
                self.output_format = parse_output_format(value, source=source)
            else:
                logger.warning("Ignoring unknown config key '%s' in %s", key, source or "<table>")
        if source is not None:
            self.config_files.append(source)

    def apply_overrides(self, **overrides: object) -> None:
        """Apply command-line overrides; ``None`` values mean "not given"."""
        known = {f.name for f in fields(self)}
        for key, value in overrides.items():
            if value is None:
                continue
            if key not in known:
                raise ConfigError(f"Unknown override '{key}'")
            if key == Key.OUTPUT_FORMAT:
                value = parse_output_format(value)
            setattr(self, key, value)

    def freeze(self) -> LogmarkConfig:
        """Return an immutable snapshot of this builder."""
        return LogmarkConfig(
            escape=self.escape,
            split_lines=self.split_lines,
            output_format=self.output_format,
            escape_cells=self.escape_cells,
            config_files=tuple(self.config_files),
        )


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (``logmark.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read config file: {e}", source=str(path)) from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML: {e}", source=str(path)) from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_pyproject_table(data: Mapping[str, Any]) -> TomlTable | None:
    """Return the ``[tool.logmark]`` table of a parsed pyproject, if present."""
    node: Any = data
    for part in PYPROJECT_SECTION:
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return cast("TomlTable", node) if isinstance(node, dict) else None


def discover_local_tables(root: Path) -> list[tuple[Path, TomlTable]]:
    """Find LogMark settings in ``root`` (pyproject first, then logmark.toml).

    Returns:
        Pairs of (source path, settings table), lowest precedence first.
    """
    found: list[tuple[Path, TomlTable]] = []
    pyproject: Path = root / PYPROJECT_TOML_NAME
    if pyproject.is_file():
        table = extract_pyproject_table(load_toml_dict(pyproject))
        if table is not None:
            found.append((pyproject, table))
    local: Path = root / LOGMARK_TOML_NAME
    if local.is_file():
        found.append((local, load_toml_dict(local)))
    logger.debug("Discovered %d local config source(s) in %s", len(found), root)
    return found


def load_config(
    *,
    root: Path | None = None,
    config_paths: Iterable[Path | str] = (),
    use_local: bool = True,
    **overrides: object,
) -> LogmarkConfig:
    """Resolve the effective configuration.

    Args:
        root: Directory searched for local config files (default: cwd).
        config_paths: Explicit config files, applied after local files.
        use_local: If False, skip ``pyproject.toml``/``logmark.toml`` discovery.
        **overrides: Command-line overrides; ``None`` values are ignored.

    Returns:
        The frozen configuration.

    Raises:
        ConfigError: On unreadable files or invalid values.
    """
    builder = MutableLogmarkConfig.from_defaults()
    if use_local:
        for path, table in discover_local_tables(root or Path.cwd()):
            builder.merge_table(table, source=str(path))
    for raw in config_paths:
        path = Path(raw)
        builder.merge_table(load_toml_dict(path), source=str(path))
    builder.apply_overrides(**overrides)
    config = builder.freeze()
    logger.trace("Resolved config: %r", config)
    return config


def to_toml(config: LogmarkConfig, *, for_pyproject: bool = False) -> str:
    """Render ``config`` as a TOML document.

    Args:
        config: The configuration to render.
        for_pyproject: If True, nest the settings under ``[tool.logmark]``.

    Returns:
        TOML document text.
    """
    doc: tomlkit.TOMLDocument = tomlkit.document()
    values: TomlTable = config.to_dict()
    if for_pyproject:
        section = tomlkit.table()
        for key, value in values.items():
            section.add(key, value)
        tool = tomlkit.table(is_super_table=True)
        tool.add(PYPROJECT_SECTION[1], section)
        doc.add(PYPROJECT_SECTION[0], tool)
    else:
        for key, value in values.items():
            doc.add(key, value)
    return tomlkit.dumps(doc)
