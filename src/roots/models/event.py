"""
Immutable Nostr event record.

An [Event][roots.models.event.Event] carries exactly the seven NIP-01
fields. It holds values verbatim, since any change to ``pubkey``,
``created_at``, ``kind``, ``tags`` or ``content`` changes the
content-addressed ``id``. Only the container type of ``tags`` is frozen to
nested tuples, so events are hashable and compare equal however their tags
were built.

See Also:
    [roots.nips.nip01.id][]: Canonical serialization and id derivation.
    [roots.nips.nip01.validator][]: Structural, id and signature checks.
    [roots.nips.nip01.event_json][]: Wire JSON encoding and decoding.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ._validation import validate_instance, validate_int, validate_str_sequence


Tag = Sequence[str]
"""Tag name at position 0, primary value at 1, optional values after."""


@dataclass(frozen=True, slots=True)
class Event:
    """Immutable Nostr event.

    Construction only checks Python types. Protocol validity (hex formats,
    tag arity, id and signature) is the job of
    [validate()][roots.nips.nip01.validator.validate], so that decoded
    events can be inspected before they are accepted or rejected.

    Attributes:
        id: 64-char lowercase hex content address of the other fields.
        pubkey: 64-char lowercase hex x-only public key of the signer.
        created_at: Unix timestamp in seconds (zero and negative allowed).
        kind: Event kind; any integer is stored as-is.
        tags: Ordered tags as a tuple of string tuples (any sequence of
            string sequences is accepted). Order participates in the id.
        content: Arbitrary string, possibly empty.
        sig: 128-char lowercase hex Schnorr signature over ``id``.

    Examples:
        ```python
        event = Event(
            id="c7a7...",
            pubkey="cfa8...",
            created_at=1760740551,
            kind=1,
            tags=[["e", "5c83..."]],
            content="hello world",
            sig="0fb7...",
        )
        unsigned = event.replace(id="", sig="")
        ```

    Raises:
        TypeError: If a field does not have the expected Python type.
    """

    id: str
    pubkey: str
    created_at: int
    kind: int
    tags: Sequence[Tag]
    content: str
    sig: str

    def __post_init__(self) -> None:
        validate_instance(self.id, str, "id")
        validate_instance(self.pubkey, str, "pubkey")
        validate_int(self.created_at, "created_at")
        validate_int(self.kind, "kind")
        if isinstance(self.tags, str) or not isinstance(self.tags, Sequence):
            raise TypeError(f"tags must be a sequence, got {type(self.tags).__name__}")
        for tag in self.tags:
            validate_str_sequence(tag, "tag")
        validate_instance(self.content, str, "content")
        validate_instance(self.sig, str, "sig")
        object.__setattr__(self, "tags", tuple(tuple(tag) for tag in self.tags))

    def replace(self, **changes: Any) -> Event:
        """Return a copy of this event with the given fields replaced."""
        return dataclasses.replace(self, **changes)
