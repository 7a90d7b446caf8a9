# topmark:header:start
#
#   project      : LogMark
#   file         : context.py
#   file_relpath : src/logmark/core/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Execution context owning one log collector.

Code that produces user-facing output receives an
[`ExecutionContext`][logmark.core.context.ExecutionContext] (or its collector)
explicitly instead of reaching for ambient, per-thread state. Each logical unit
of work (a command invocation, a handled request) creates its own context, so
buffers are never shared between concurrent units.

Typical usage:

```python
ctx = ExecutionContext.create()
ctx.println("Deploying", name, "...")
ctx.print_table([["Status", "ok"]])
for message in ctx.drain_logs():
    transport.send(message, parse_mode="MarkdownV2")
```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from logmark.config.settings import LogmarkConfig
from logmark.core.collector import LogCollector
from logmark.core.table import print_table

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from logmark.core.table import CellLike


@dataclass(slots=True)
class ExecutionContext:
    """One unit of work and its private output buffer.

    Attributes:
        config: Resolved settings for this unit of work.
        collector: The buffer receiving every message emitted in this context.
    """

    config: LogmarkConfig = field(default_factory=LogmarkConfig)
    collector: LogCollector = field(default_factory=LogCollector)

    @classmethod
    def create(cls, config: LogmarkConfig | None = None) -> ExecutionContext:
        """Return a new context with a fresh, empty collector."""
        return cls(config=config or LogmarkConfig(), collector=LogCollector())

    def println(self, *args: object, sep: str = " ") -> None:
        """Log an escaped message (see [`LogCollector.println`][logmark.core.collector.LogCollector.println])."""
        self.collector.println(*args, sep=sep)

    def eprintln(self, *args: object, sep: str = " ") -> None:
        """Log an escaped diagnostic message."""
        self.collector.eprintln(*args, sep=sep)

    def println_escaped(self, *args: object, sep: str = " ") -> None:
        """Log a message that is already valid markup."""
        self.collector.println_escaped(*args, sep=sep)

    def print_table(self, rows: Iterable[Sequence[CellLike]]) -> None:
        """Log ``rows`` as one flattened table entry.

        Cell escaping follows ``config.escape_cells``.
        """
        print_table(self.collector, rows, escape_cells=self.config.escape_cells)

    def drain_logs(self) -> list[str]:
        """Drain and return the messages collected so far."""
        return self.collector.drain_logs()
