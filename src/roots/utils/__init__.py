"""Cryptographic backend wiring and Nostr key helpers.

The utils layer sits in the middle of the diamond DAG, depending only on
[roots.models][roots.models] and [roots.core][roots.core]. It is the only
layer that imports cryptography libraries.

Attributes:
    crypto: [CryptoBackend][roots.utils.crypto.CryptoBackend] bundling
        hash, Schnorr sign/verify and key derivation/generation, with a
        default wiring on ``hashlib``, ``coincurve`` and ``nostr_sdk``.
    keys: Hex key generation and public key derivation.

Examples:
    ```python
    from roots.utils.crypto import default_backend
    from roots.utils.keys import get_public_key
    ```
"""

from .crypto import CryptoBackend, default_backend, resolve_backend
from .keys import generate_private_key, get_public_key


__all__ = [
    "CryptoBackend",
    "default_backend",
    "generate_private_key",
    "get_public_key",
    "resolve_backend",
]
