"""
Deterministic Schnorr signing of event ids.

Auxiliary randomness is ``hash(private_key)``, so the same key and id
always produce the same signature. This makes signatures reproducible
across implementations and lets tests pin exact signature vectors.

Examples:
    ```python
    event = finalize_event(
        private_key,
        created_at=1760740551,
        kind=1,
        tags=[],
        content="hello world",
    )
    validate(event)  # passes
    ```
"""

from __future__ import annotations

from collections.abc import Sequence

from roots.core.exceptions import MalformedIDError, MalformedPrivKeyError
from roots.models.constants import HEX_64_PATTERN
from roots.models.event import Event, Tag
from roots.utils.crypto import KEY_SIZE, CryptoBackend, resolve_backend
from roots.utils.keys import get_public_key

from .id import get_id


def sign(event_id: str, private_key: str, *, backend: CryptoBackend | None = None) -> str:
    """Sign an event id with a private key.

    Args:
        event_id: 64-character hex event id.
        private_key: 64-character lowercase hex private key.
        backend: Crypto backend; the default backend when omitted.

    Returns:
        128-character lowercase hex Schnorr signature.

    Raises:
        MalformedPrivKeyError: If *private_key* is not 64 lowercase hex.
        MalformedIDError: If *event_id* does not decode to 32 bytes.
        ValueError: If *event_id* is not valid hex (from ``bytes.fromhex``).
    """
    if not HEX_64_PATTERN.fullmatch(private_key):
        raise MalformedPrivKeyError
    crypto = resolve_backend(backend)
    private_key_bytes = bytes.fromhex(private_key)

    id_bytes = bytes.fromhex(event_id)
    if len(id_bytes) != KEY_SIZE:
        raise MalformedIDError

    aux_rand = crypto.hash(private_key_bytes)
    return crypto.sign(id_bytes, private_key_bytes, aux_rand).hex()


def finalize_event(
    private_key: str,
    *,
    created_at: int,
    kind: int,
    tags: Sequence[Tag] = (),
    content: str = "",
    backend: CryptoBackend | None = None,
) -> Event:
    """Build a complete signed event from its signable fields.

    Derives the pubkey from *private_key*, computes the id and signs it.

    Raises:
        MalformedPrivKeyError: If *private_key* is not 64 lowercase hex.
    """
    pubkey = get_public_key(private_key, backend=backend)
    unsigned = Event(
        id="",
        pubkey=pubkey,
        created_at=created_at,
        kind=kind,
        tags=[list(tag) for tag in tags],
        content=content,
        sig="",
    )
    event_id = get_id(unsigned, backend=backend)
    return unsigned.replace(id=event_id, sig=sign(event_id, private_key, backend=backend))
