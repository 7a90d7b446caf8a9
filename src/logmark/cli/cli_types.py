# topmark:header:start
#
#   project      : LogMark
#   file         : cli_types.py
#   file_relpath : src/logmark/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click parameter types for LogMark's string-valued enums.

LogMark exposes several ``(str, Enum)`` vocabularies on the command line
(`OutputFormat`, `MarkupZone`, `ColorMode`). `EnumChoiceParam` turns the
enum's values into case-insensitive choices and hands the enum member to the
command function.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

import click

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(click.ParamType, Generic[E]):
    """Accept an enum value (any case) and convert it to the enum member.

    Args:
        enum_cls (type[E]): Enum whose members carry string values.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name: str = enum_cls.__name__.lower()
        self._by_value: dict[str, E] = {str(m.value).lower(): m for m in enum_cls}

    @property
    def choices(self) -> list[str]:
        """Accepted values, in declaration order."""
        return [str(m.value) for m in self.enum_cls]

    def convert(
        self,
        value: str | E,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E:
        """Return the enum member for ``value`` or fail with the list of choices."""
        if isinstance(value, self.enum_cls):
            return value
        member: E | None = self._by_value.get(str(value).strip().lower())
        if member is None:
            self.fail(
                f"{value!r} is not one of: {', '.join(self.choices)}.",
                param,
                ctx,
            )
        return member

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Complete enum values starting with ``incomplete``.

        Bash: `eval "$(_LOGMARK_COMPLETE=bash_source logmark)"`
        """
        from click.shell_completion import CompletionItem

        prefix: str = incomplete.lower()
        return [CompletionItem(c) for c in self.choices if c.lower().startswith(prefix)]

    def __repr__(self) -> str:
        return f"EnumChoiceParam({self.enum_cls.__name__})"
