"""Pluggable hash and Schnorr signature backend.

The protocol code never imports a cryptography library directly. It calls
the five capabilities bundled in a
[CryptoBackend][roots.utils.crypto.CryptoBackend], which callers pass
explicitly (``backend=...``) or leave to the process-wide default built by
[default_backend()][roots.utils.crypto.default_backend].

Default wiring:

* ``hash`` -- ``hashlib.sha256``.
* ``sign`` / ``verify`` -- BIP-340 Schnorr from ``coincurve`` (libsecp256k1),
  which accepts caller-supplied auxiliary randomness so that signing can
  be deterministic.
* ``derive_public_key`` / ``generate_private_key`` -- ``nostr_sdk.Keys``.

All byte buffers have fixed lengths: 32-byte messages, keys and digests,
64-byte signatures. Errors raised by the primitives (wrong lengths, keys
outside the curve order) propagate unchanged. A public key that is not a
point on the curve fails verification instead of raising.

Examples:
    ```python
    backend = default_backend()
    digest = backend.hash(b"payload")
    sig = backend.sign(digest, secret, backend.hash(secret))
    backend.verify(sig, digest, backend.derive_public_key(secret))  # True
    ```
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from dataclasses import dataclass
from functools import cache

from coincurve.keys import PrivateKey, PublicKeyXOnly
from nostr_sdk import Keys


HASH_SIZE = 32
KEY_SIZE = 32
SIGNATURE_SIZE = 64


@dataclass(frozen=True, slots=True)
class CryptoBackend:
    """Bundle of the hash and Schnorr capabilities used by the protocol code.

    Attributes:
        hash: ``bytes -> 32-byte digest``.
        sign: ``(message32, private_key32, aux_rand32) -> 64-byte signature``.
        verify: ``(signature64, message32, public_key32) -> bool``.
        derive_public_key: ``private_key32 -> 32-byte x-only public key``.
        generate_private_key: ``() -> 32-byte private key``.

    Examples:
        Tests can substitute any capability:

        ```python
        def broken_hash(data: bytes) -> bytes:
            raise RuntimeError("hash unavailable")

        backend = dataclasses.replace(default_backend(), hash=broken_hash)
        ```
    """

    hash: Callable[[bytes], bytes]
    sign: Callable[[bytes, bytes, bytes], bytes]
    verify: Callable[[bytes, bytes, bytes], bool]
    derive_public_key: Callable[[bytes], bytes]
    generate_private_key: Callable[[], bytes]


def sha256(data: bytes) -> bytes:
    """Return the SHA-256 digest of *data*."""
    return hashlib.sha256(data).digest()


def _check_size(value: bytes, size: int, name: str) -> None:
    if len(value) != size:
        raise ValueError(f"{name} must be {size} bytes, got {len(value)}")


def schnorr_sign(message: bytes, private_key: bytes, aux_rand: bytes) -> bytes:
    """Create a BIP-340 Schnorr signature over a 32-byte message."""
    _check_size(message, HASH_SIZE, "message")
    _check_size(private_key, KEY_SIZE, "private key")
    _check_size(aux_rand, HASH_SIZE, "auxiliary randomness")
    return PrivateKey(private_key).sign_schnorr(message, aux_rand)


def schnorr_verify(signature: bytes, message: bytes, public_key: bytes) -> bool:
    """Verify a BIP-340 Schnorr signature against an x-only public key."""
    _check_size(signature, SIGNATURE_SIZE, "signature")
    _check_size(message, HASH_SIZE, "message")
    _check_size(public_key, KEY_SIZE, "public key")
    try:
        point = PublicKeyXOnly(public_key)
    except ValueError:
        # x coordinate is not on the curve
        return False
    return point.verify(signature, message)


def derive_public_key(private_key: bytes) -> bytes:
    """Derive the 32-byte x-only public key for *private_key*."""
    _check_size(private_key, KEY_SIZE, "private key")
    return bytes.fromhex(Keys.parse(private_key.hex()).public_key().to_hex())


def generate_private_key() -> bytes:
    """Generate a random secp256k1 private key."""
    return bytes.fromhex(Keys.generate().secret_key().to_hex())


@cache
def default_backend() -> CryptoBackend:
    """Return the process-wide default backend (built once, immutable)."""
    return CryptoBackend(
        hash=sha256,
        sign=schnorr_sign,
        verify=schnorr_verify,
        derive_public_key=derive_public_key,
        generate_private_key=generate_private_key,
    )


def resolve_backend(backend: CryptoBackend | None) -> CryptoBackend:
    """Return *backend*, or the default backend when it is None."""
    return backend if backend is not None else default_backend()
