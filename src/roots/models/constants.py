"""Shared constants for the models layer.

Defines the hex patterns, well-known kinds and filter key names that are
used across the models and NIP-01 modules. Placing them here avoids
circular dependencies between the models, utils and nips layers.

See Also:
    [roots.nips.nip01.validator][]: Uses the hex patterns for the
        structural validation stage.
    [roots.nips.nip01.filter_json][]: Uses
        [STANDARD_FILTER_FIELDS][roots.models.constants.STANDARD_FILTER_FIELDS]
        and [TAG_FILTER_PREFIX][roots.models.constants.TAG_FILTER_PREFIX]
        to split filter keys.
"""

from __future__ import annotations

import re
from enum import IntEnum


HEX_64_PATTERN = re.compile(r"[a-f0-9]{64}")
"""Matches 64-character lowercase hex strings (event ids and keys). Use with ``fullmatch``."""

HEX_128_PATTERN = re.compile(r"[a-f0-9]{128}")
"""Matches 128-character lowercase hex strings (signatures). Use with ``fullmatch``."""

PROTOCOL_VERSION = 0
"""Leading marker of the canonical serialization array."""

TAG_FILTER_PREFIX = "#"

STANDARD_FILTER_FIELDS: tuple[str, ...] = ("ids", "authors", "kinds", "since", "until", "limit")
"""Standard filter keys in wire order."""


class EventKind(IntEnum):
    """Well-known Nostr event kinds.

    The core never enforces an enumeration of kinds: any
    integer is accepted. These members exist for readability in callers
    and tests.

    Attributes:
        SET_METADATA: Kind 0 -- user profile metadata (NIP-01).
        TEXT_NOTE: Kind 1 -- short text note (NIP-01).
        RECOMMEND_RELAY: Kind 2 -- legacy relay recommendation (NIP-01, deprecated).
        CONTACTS: Kind 3 -- contact list with relay hints (NIP-02).
    """

    SET_METADATA = 0
    TEXT_NOTE = 1
    RECOMMEND_RELAY = 2
    CONTACTS = 3
