# topmark:header:start
#
#   project      : LogMark
#   file         : machine.py
#   file_relpath : src/logmark/core/machine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Machine-readable (JSON/NDJSON) shapes for drained messages.

This module is intentionally console- and Click-free: it shapes payloads and
serializes them to strings.

Shapes:

- JSON: one envelope ``{"meta": {...}, "messages": [...]}``.
- NDJSON: one record per message,
  ``{"kind": "message", "meta": {...}, "message": {"index": i, "text": "..."}}``.

Messages are emitted exactly as drained; they are already markup-safe.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Final, TypedDict

from logmark.constants import LOGMARK_TOOL_NAME, LOGMARK_VERSION

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping, Sequence


class MachineKey:
    """Canonical keys used in machine-readable JSON/NDJSON envelopes."""

    KIND: Final[str] = "kind"
    META: Final[str] = "meta"

    MESSAGE: Final[str] = "message"
    MESSAGES: Final[str] = "messages"
    INDEX: Final[str] = "index"
    TEXT: Final[str] = "text"

    VERSION: Final[str] = "version"


class MachineKind:
    """Canonical `kind` values for NDJSON records."""

    MESSAGE: Final[str] = "message"
    VERSION: Final[str] = "version"


class MetaPayload(TypedDict):
    """Metadata describing the LogMark runtime for machine output."""

    tool: str
    version: str


def build_meta_payload() -> MetaPayload:
    """Return the ``meta`` block shared by all envelopes and records."""
    return {"tool": LOGMARK_TOOL_NAME, "version": LOGMARK_VERSION}


def build_json_envelope(*, meta: MetaPayload, **payloads: object) -> dict[str, object]:
    """Build a JSON envelope with `meta` plus one or more named payloads.

    Args:
        meta: Metadata payload (tool/version).
        **payloads: One or more named, JSON-serializable payload objects.

    Returns:
        JSON-serializable envelope dict.
    """
    out: dict[str, object] = {MachineKey.META: dict(meta)}
    out.update(payloads)
    return out


def build_ndjson_record(
    *,
    kind: str,
    meta: MetaPayload,
    payload: object,
) -> dict[str, object]:
    """Build a single NDJSON record ``{"kind": kind, "meta": meta, kind: payload}``."""
    return {
        MachineKey.KIND: kind,
        MachineKey.META: dict(meta),
        kind: payload,
    }


def iter_message_records(
    messages: Sequence[str], *, meta: MetaPayload | None = None
) -> Iterator[dict[str, object]]:
    """Yield one NDJSON record per drained message, preserving order."""
    meta = meta or build_meta_payload()
    for index, text in enumerate(messages):
        yield build_ndjson_record(
            kind=MachineKind.MESSAGE,
            meta=meta,
            payload={MachineKey.INDEX: index, MachineKey.TEXT: text},
        )


def serialize_json_envelope(meta: MetaPayload, **payloads: object) -> str:
    """Serialize a JSON envelope as pretty-printed JSON."""
    return json.dumps(build_json_envelope(meta=meta, **payloads), indent=2, ensure_ascii=False)


def serialize_ndjson(records: Iterable[Mapping[str, object]]) -> str:
    """Serialize NDJSON records to a single newline-delimited string.

    Returns:
        str: One JSON document per line, with a trailing newline; an empty
            string when there are no records.
    """
    lines = [json.dumps(record, ensure_ascii=False) for record in records]
    return "".join(f"{line}\n" for line in lines)


def messages_to_json(messages: Sequence[str]) -> str:
    """Serialize drained messages as a JSON envelope."""
    return serialize_json_envelope(build_meta_payload(), **{MachineKey.MESSAGES: list(messages)})


def messages_to_ndjson(messages: Sequence[str]) -> str:
    """Serialize drained messages as NDJSON, one record per message."""
    return serialize_ndjson(iter_message_records(messages))
