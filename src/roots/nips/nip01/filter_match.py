"""
Filter evaluation against events.

A filter matches an event when every populated criterion holds (AND
across fields). Inside ``ids``, ``authors``, ``kinds`` and each tag list
any single entry suffices (OR within a field). Absent, ``None`` and empty
criteria impose no constraint. ``limit`` and ``extensions`` are never
consulted: they concern the caller or the transport.

Note:
    ``since`` and ``until`` are tested for truthiness, so a literal ``0``
    behaves like "not set" rather than as a boundary at the epoch.
    Negative bounds are truthy and apply normally.

Note:
    Event tags with fewer than two elements are skipped when indexing,
    never raised on. [validate_structure()][roots.nips.nip01.validator.validate_structure]
    is where such tags are rejected.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

from roots.models.event import Event, Tag
from roots.models.filter import Filter, TagFilters


def _matches_prefix(candidate: str, prefixes: Iterable[str]) -> bool:
    return any(candidate.startswith(prefix) for prefix in prefixes)


def _matches_time_range(timestamp: int, since: int | None, until: int | None) -> bool:
    if since and timestamp < since:
        return False
    return not (until and timestamp > until)


def _index_tags(tags: Sequence[Tag]) -> dict[str, set[str]]:
    index: dict[str, set[str]] = defaultdict(set)
    for tag in tags:
        if len(tag) < 2:
            continue
        index[tag[0]].add(tag[1])
    return index


def _matches_tags(tags: Sequence[Tag], tag_filters: TagFilters) -> bool:
    index = _index_tags(tags)
    for name, values in tag_filters.items():
        if not values:
            continue
        indexed = index.get(name)
        if not indexed or not any(value in indexed for value in values):
            return False
    return True


def matches(filter: Filter, event: Event) -> bool:  # noqa: A002
    """Return True if *event* satisfies every criterion of *filter*.

    Pure and side-effect free; never raises for malformed tags.
    """
    if filter.ids and not _matches_prefix(event.id, filter.ids):
        return False
    if filter.authors and not _matches_prefix(event.pubkey, filter.authors):
        return False
    if filter.kinds and event.kind not in filter.kinds:
        return False
    if not _matches_time_range(event.created_at, filter.since or None, filter.until or None):
        return False
    return not (filter.tags and not _matches_tags(event.tags, filter.tags))


def match_any(filters: Iterable[Filter], event: Event) -> bool:
    """Return True if *event* matches at least one of *filters*.

    A subscription with several filters selects the union of their
    matches. An empty iterable matches nothing.
    """
    return any(matches(f, event) for f in filters)
