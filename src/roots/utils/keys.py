"""Nostr key helpers for roots.

Hex-level wrappers around the key capabilities of the
[CryptoBackend][roots.utils.crypto.CryptoBackend].

Warning:
    Private keys must **never** be stored in configuration files, source code,
    or logged to any output.

Examples:
    ```python
    secret = generate_private_key()
    pubkey = get_public_key(secret)
    ```
"""

from __future__ import annotations

from roots.core.exceptions import MalformedPrivKeyError
from roots.models.constants import HEX_64_PATTERN

from .crypto import CryptoBackend, resolve_backend


def generate_private_key(*, backend: CryptoBackend | None = None) -> str:
    """Generate a new random private key as 64 lowercase hex characters."""
    return resolve_backend(backend).generate_private_key().hex()


def get_public_key(private_key: str, *, backend: CryptoBackend | None = None) -> str:
    """Derive the x-only public key for a hex private key.

    Args:
        private_key: 64-character lowercase hex private key.
        backend: Crypto backend; the default backend when omitted.

    Returns:
        64-character lowercase hex public key.

    Raises:
        MalformedPrivKeyError: If *private_key* is not 64 lowercase hex
            characters. Uppercase hex is rejected.
    """
    if not HEX_64_PATTERN.fullmatch(private_key):
        raise MalformedPrivKeyError
    return resolve_backend(backend).derive_public_key(bytes.fromhex(private_key)).hex()

