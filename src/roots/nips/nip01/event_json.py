"""
Event wire JSON encoding and decoding.

Encoding emits the seven fields in the fixed order
``id, pubkey, created_at, kind, tags, content, sig``. Python dicts keep
insertion order and ``json.dumps`` preserves it, so the order survives to
the wire text.

Decoding is permissive: a missing field, or a field whose JSON type is
wrong, becomes the field's zero value (``""``, ``0`` or ``[]``) instead of
raising. Strictness belongs to
[validate()][roots.nips.nip01.validator.validate].

Examples:
    ```python
    event = loads('{"id": "c7a7...", "pubkey": "cfa8...", ...}')
    validate(event)
    dumps(event)  # compact text, fields in wire order
    ```
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from roots.models.event import Event


def to_json(event: Event) -> dict[str, Any]:
    """Convert an event to a JSON-ready dict with keys in wire order."""
    return {
        "id": event.id,
        "pubkey": event.pubkey,
        "created_at": event.created_at,
        "kind": event.kind,
        "tags": [list(tag) for tag in event.tags],
        "content": event.content,
        "sig": event.sig,
    }


def _parse_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _parse_int(value: Any) -> int:
    return value if isinstance(value, int) and not isinstance(value, bool) else 0


def _parse_tags(value: Any) -> list[list[str]]:
    if not isinstance(value, list):
        return []
    return [
        [_parse_str(item) for item in tag] if isinstance(tag, list) else []
        for tag in value
    ]


def from_json(data: Any) -> Event:
    """Build an event from parsed JSON, substituting zero values.

    A non-string field becomes ``""``, a non-integer (or boolean) number
    field becomes ``0``, a non-list ``tags`` becomes ``[]``, a tag that is
    not a list becomes ``[]`` and a non-string tag element becomes ``""``.
    A non-mapping *data* yields the all-zero event. Never raises.
    """
    if not isinstance(data, Mapping):
        data = {}
    return Event(
        id=_parse_str(data.get("id")),
        pubkey=_parse_str(data.get("pubkey")),
        created_at=_parse_int(data.get("created_at")),
        kind=_parse_int(data.get("kind")),
        tags=_parse_tags(data.get("tags")),
        content=_parse_str(data.get("content")),
        sig=_parse_str(data.get("sig")),
    )


def dumps(event: Event) -> str:
    """Serialize an event to compact wire JSON text."""
    return json.dumps(to_json(event), separators=(",", ":"), ensure_ascii=False)


def loads(text: str | bytes) -> Event:
    """Parse wire JSON text into an event.

    Raises:
        json.JSONDecodeError: If *text* is not valid JSON. Once parsed, the
            document is decoded permissively by
            [from_json()][roots.nips.nip01.event_json.from_json].
    """
    return from_json(json.loads(text))
