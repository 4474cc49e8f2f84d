"""
Immutable Nostr subscription filter.

A [Filter][roots.models.filter.Filter] distinguishes three states for each
field: absent (the key was never set), explicit ``None`` (JSON ``null``),
and a populated value. The absent state is represented by the
[ABSENT][roots.models.filter.ABSENT] sentinel so that encoding can
reproduce exactly what the caller set.

See Also:
    [roots.nips.nip01.filter_match][]: Evaluates a filter against an event.
    [roots.nips.nip01.filter_json][]: Wire JSON encoding and decoding,
        including ``#<tag>`` keys and extension passthrough.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final, Literal, TypeAlias

from ._validation import (
    validate_int,
    validate_int_sequence,
    validate_mapping,
    validate_str_sequence,
)


class Absent(Enum):
    """Sentinel type for a filter field that was never set.

    ``ABSENT`` is falsy so that ``if filter.ids:`` treats absent, ``None``
    and empty lists alike, which is what matching needs.
    """

    ABSENT = "absent"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Final = Absent.ABSENT

Unset: TypeAlias = Literal[Absent.ABSENT]

JsonValue: TypeAlias = None | bool | int | float | str | list["JsonValue"] | dict[str, "JsonValue"]
"""Any value that ``json.loads`` can produce."""

TagFilters: TypeAlias = Mapping[str, Sequence[str] | None]
"""Tag name (without ``#``) to accepted primary values, or ``None``."""

FilterExtensions: TypeAlias = Mapping[str, JsonValue]
"""Unrecognized top-level filter keys, kept verbatim."""


@dataclass(frozen=True, slots=True)
class Filter:
    """Immutable subscription filter.

    All fields default to [ABSENT][roots.models.filter.ABSENT]. Fields are
    combined with AND; values inside ``ids``, ``authors``, ``kinds`` and
    each tag list are combined with OR.

    Attributes:
        ids: Event id prefixes, ``None``, or absent.
        authors: Pubkey prefixes, ``None``, or absent.
        kinds: Accepted kinds, ``None``, or absent.
        since: Lower bound on ``created_at``, ``None``, or absent.
        until: Upper bound on ``created_at``, ``None``, or absent.
        limit: Result count hint for relays, ``None``, or absent.
        tags: Tag name to accepted values. Serialized as ``#<name>`` keys.
        extensions: Unrecognized top-level keys, kept verbatim.

    Examples:
        ```python
        Filter(kinds=[1], since=1700000000)
        Filter(tags={"e": ["5c83da77..."]})
        Filter(ids=None)            # serializes as {"ids": null}
        Filter()                    # serializes as {}
        ```

    Note:
        ``since``, ``until`` and ``limit`` accept ``None`` so that a caller
        can emit an explicit ``null``; decoding never produces ``None`` for
        them (a JSON ``null`` decodes to ``ABSENT``).

    Raises:
        TypeError: If a populated field does not have the expected type.
    """

    ids: Sequence[str] | None | Unset = ABSENT
    authors: Sequence[str] | None | Unset = ABSENT
    kinds: Sequence[int] | None | Unset = ABSENT
    since: int | None | Unset = ABSENT
    until: int | None | Unset = ABSENT
    limit: int | None | Unset = ABSENT
    tags: TagFilters | Unset = ABSENT
    extensions: FilterExtensions | Unset = ABSENT

    def __post_init__(self) -> None:
        for name in ("ids", "authors"):
            value = getattr(self, name)
            if _is_populated(value):
                validate_str_sequence(value, name)
        if _is_populated(self.kinds):
            validate_int_sequence(self.kinds, "kinds")
        for name in ("since", "until", "limit"):
            value = getattr(self, name)
            if _is_populated(value):
                validate_int(value, name)
        if _is_populated(self.tags):
            validate_mapping(self.tags, "tags")
            for tag_name, values in self.tags.items():
                if values is not None:
                    validate_str_sequence(values, f"tags[{tag_name!r}]")
        if _is_populated(self.extensions):
            validate_mapping(self.extensions, "extensions")

    def is_set(self, name: str) -> bool:
        """Return True if field *name* is present (``None`` counts as present)."""
        return getattr(self, name) is not ABSENT

    def replace(self, **changes: Any) -> Filter:
        """Return a copy of this filter with the given fields replaced."""
        return dataclasses.replace(self, **changes)


def _is_populated(value: Any) -> bool:
    return value is not ABSENT and value is not None
