"""Pure frozen dataclasses with zero I/O for Nostr events and filters.

The models layer is the foundation of the diamond DAG. It has **no dependencies**
on any other roots package -- only the Python standard library. Every model uses
``@dataclass(frozen=True, slots=True)`` for immutability and memory efficiency.

Construction checks Python types only. Protocol rules (hex formats, tag
arity, id and signature) are enforced by [roots.nips.nip01][].

Attributes:
    Event: The seven-field NIP-01 event record.
    Tag: Alias for a tag (sequence of strings).
    Filter: Subscription criteria with tri-state (absent / null / populated)
        fields, tag filters and extension passthrough.
    ABSENT: Sentinel for a filter field that was never set.
    EventKind: Well-known event kinds (informational only).

See Also:
    [roots.models.event][]: Event record.
    [roots.models.filter][]: Filter record and sentinels.
    [roots.models.constants][]: Shared constants and enumerations.
"""

from .constants import (
    HEX_64_PATTERN,
    HEX_128_PATTERN,
    PROTOCOL_VERSION,
    STANDARD_FILTER_FIELDS,
    TAG_FILTER_PREFIX,
    EventKind,
)
from .event import Event, Tag
from .filter import ABSENT, Absent, Filter, FilterExtensions, JsonValue, TagFilters


__all__ = [
    "ABSENT",
    "HEX_128_PATTERN",
    "HEX_64_PATTERN",
    "PROTOCOL_VERSION",
    "STANDARD_FILTER_FIELDS",
    "TAG_FILTER_PREFIX",
    "Absent",
    "Event",
    "EventKind",
    "Filter",
    "FilterExtensions",
    "JsonValue",
    "Tag",
    "TagFilters",
]
