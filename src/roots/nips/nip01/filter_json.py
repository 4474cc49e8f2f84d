"""
Filter wire JSON encoding and decoding.

A wire filter object holds three kinds of keys:

* standard keys ``ids, authors, kinds, since, until, limit``;
* tag keys ``#<name>`` mapping to a list of values or ``null``;
* any other key, kept verbatim as an extension.

Encoding emits only fields that are set (an explicit ``None`` is emitted
as ``null``, an [ABSENT][roots.models.filter.ABSENT] field is omitted),
then one ``#<name>`` key per tag filter, then the extensions. Extension
keys that collide with a standard key or start with ``#`` are dropped:
the standard fields and the tags map always win.

Decoding keeps ``null`` for ``ids``, ``authors`` and ``kinds`` but turns
``null`` into ``ABSENT`` for ``since``, ``until`` and ``limit``. Like event
decoding it never raises: a standard value of the wrong JSON type leaves
the field absent, wrongly typed list items are dropped, and a tag key
whose value is not a list decodes as ``null``.

A standard key present with the wrong type (``{"ids": "abc"}``,
``{"limit": 10.0}``) is therefore not preserved: the field stays
``ABSENT`` and the key is missing from the re-encoded object. Typed
[Filter][roots.models.filter.Filter] fields cannot hold a value of the
wrong type, and only extension keys are carried verbatim.

Examples:
    ```python
    f = from_json({"ids": None, "since": None, "#e": ["5c83..."], "search": "x"})
    f.ids           # None
    f.since         # ABSENT
    f.tags          # {"e": ["5c83..."]}
    f.extensions    # {"search": "x"}
    to_json(f)      # {"ids": None, "#e": ["5c83..."], "search": "x"}
    ```
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from roots.models.constants import STANDARD_FILTER_FIELDS, TAG_FILTER_PREFIX
from roots.models.filter import ABSENT, Filter, JsonValue


def _is_reserved_key(key: str) -> bool:
    return key in STANDARD_FILTER_FIELDS or key.startswith(TAG_FILTER_PREFIX)


def _thaw(value: Any) -> Any:
    """Copy a (possibly tuple-based) sequence into a JSON-ready list."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return value


def to_json(filter: Filter) -> dict[str, JsonValue]:  # noqa: A002
    """Convert a filter to a JSON-ready dict.

    Key order: standard fields, then ``#<name>`` tag keys, then extensions.
    """
    output: dict[str, JsonValue] = {}

    for name in STANDARD_FILTER_FIELDS:
        value = getattr(filter, name)
        if value is not ABSENT:
            output[name] = _thaw(value)

    if filter.tags:
        for tag_name, values in filter.tags.items():
            output[f"{TAG_FILTER_PREFIX}{tag_name}"] = _thaw(values)

    if filter.extensions:
        for key, value in filter.extensions.items():
            if _is_reserved_key(key):
                continue
            output[key] = value

    return output


def _parse_str_list(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, list):
        return [item for item in value if isinstance(item, str)]
    return ABSENT


def _parse_int_list(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, list):
        return [item for item in value if isinstance(item, int) and not isinstance(item, bool)]
    return ABSENT


def _parse_int(value: Any) -> Any:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return ABSENT


_STANDARD_PARSERS = {
    "ids": _parse_str_list,
    "authors": _parse_str_list,
    "kinds": _parse_int_list,
    "since": _parse_int,
    "until": _parse_int,
    "limit": _parse_int,
}


def from_json(data: Any) -> Filter:
    """Build a filter from a parsed JSON object. Never raises.

    Standard keys are parsed first (``null`` kept for list fields, turned
    into ``ABSENT`` for ``since``/``until``/``limit``), every ``#``-prefixed
    key becomes a tag filter with the prefix stripped, and every remaining
    key becomes an extension with its value untouched. ``tags`` and
    ``extensions`` stay ``ABSENT`` when there is nothing to put in them.

    A non-mapping *data* yields the empty filter.
    """
    if not isinstance(data, Mapping):
        return Filter()

    fields: dict[str, Any] = {}
    tags: dict[str, list[str] | None] = {}
    extensions: dict[str, JsonValue] = {}

    for key, value in data.items():
        if not isinstance(key, str):
            continue
        parser = _STANDARD_PARSERS.get(key)
        if parser is not None:
            fields[key] = parser(value)
        elif key.startswith(TAG_FILTER_PREFIX):
            parsed = _parse_str_list(value)
            tags[key[len(TAG_FILTER_PREFIX) :]] = None if parsed is ABSENT else parsed
        else:
            extensions[key] = value

    if tags:
        fields["tags"] = tags
    if extensions:
        fields["extensions"] = extensions

    return Filter(**fields)


def dumps(filter: Filter) -> str:  # noqa: A002
    """Serialize a filter to compact wire JSON text."""
    return json.dumps(to_json(filter), separators=(",", ":"), ensure_ascii=False)


def loads(text: str | bytes) -> Filter:
    """Parse wire JSON text into a filter.

    Raises:
        json.JSONDecodeError: If *text* is not valid JSON.
    """
    return from_json(json.loads(text))
