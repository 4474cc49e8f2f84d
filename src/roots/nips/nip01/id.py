"""
Canonical event serialization and content-addressed id derivation.

The id of an event is the SHA-256 of the UTF-8 JSON text

```text
[0,<pubkey>,<created_at>,<kind>,<tags>,<content>]
```

written with no whitespace and no ASCII escaping, which is byte-for-byte
what JavaScript's ``JSON.stringify`` produces for the same values. Field
values are used verbatim; the leading ``0`` is the fixed protocol version
marker, never derived from the event.

See Also:
    [roots.nips.nip01.validator.validate_id][]: Compares the stored id
        against [get_id()][roots.nips.nip01.id.get_id].
    [roots.nips.nip01.signer.finalize_event][]: Computes the id of a new
        event before signing it.
"""

from __future__ import annotations

import json
import re

from roots.models.constants import PROTOCOL_VERSION
from roots.models.event import Event
from roots.utils.crypto import CryptoBackend, resolve_backend


# A surrogate pair, or a lone surrogate that has no partner.
_SURROGATES = re.compile("[\ud800-\udbff][\udc00-\udfff]|[\ud800-\udfff]")


def _fix_surrogate(match: re.Match[str]) -> str:
    text = match.group()
    if len(text) == 2:
        return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le")
    return f"\\u{ord(text):04x}"


def serialize(event: Event) -> bytes:
    """Return the canonical serialization of *event* as UTF-8 bytes.

    ``id`` and ``sig`` do not participate. Tags are written in their
    stored order with their values untouched.

    Lone UTF-16 surrogates (legal in wire JSON) are written as lowercase
    ``\\uXXXX`` escapes and surrogate pairs are joined into one character,
    as ``JSON.stringify`` does.
    """
    payload = [
        PROTOCOL_VERSION,
        event.pubkey,
        event.created_at,
        event.kind,
        [list(tag) for tag in event.tags],
        event.content,
    ]
    text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    text = _SURROGATES.sub(_fix_surrogate, text)
    return text.encode("utf-8")


def get_id(event: Event, *, backend: CryptoBackend | None = None) -> str:
    """Compute the event id as 64 lowercase hex characters.

    Args:
        event: The event to hash. Its own ``id`` and ``sig`` are ignored.
        backend: Crypto backend; the default backend when omitted.

    Returns:
        Lowercase hex digest of [serialize()][roots.nips.nip01.id.serialize].
    """
    return resolve_backend(backend).hash(serialize(event)).hex()
