# topmark:header:start
#
#   project      : LogMark
#   file         : version.py
#   file_relpath : src/logmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LogMark `version` command.

Prints the current LogMark version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from logmark.cli.cli_types import EnumChoiceParam
from logmark.cli.console_helpers import get_console_safely
from logmark.constants import LOGMARK_VERSION
from logmark.core.escape import escape_code
from logmark.core.formats import OutputFormat
from logmark.core.machine import (
    MachineKey,
    MachineKind,
    build_meta_payload,
    build_ndjson_record,
    serialize_json_envelope,
    serialize_ndjson,
)

if TYPE_CHECKING:
    from logmark.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of LogMark.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}); plain text if omitted.",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of LogMark.

    Args:
        output_format (OutputFormat | None): Optional output format; plain text if None.
    """
    console: ConsoleLike = get_console_safely()
    version_text: str = LOGMARK_VERSION

    if output_format == OutputFormat.JSON:
        console.print(
            serialize_json_envelope(build_meta_payload(), **{MachineKey.VERSION: version_text})
        )
    elif output_format == OutputFormat.NDJSON:
        record = build_ndjson_record(
            kind=MachineKind.VERSION,
            meta=build_meta_payload(),
            payload=version_text,
        )
        console.print(serialize_ndjson([record]), nl=False)
    elif output_format == OutputFormat.MARKDOWN:
        console.print(f"*LogMark version:* `{escape_code(version_text)}`")
    else:
        console.print(console.styled(version_text, bold=True))
