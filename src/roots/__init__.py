r"""roots -- Nostr NIP-01 events, signatures and filters.

Canonical event serialization, content-addressed ids, deterministic
Schnorr signing, three-stage event validation, filter matching and the
exact wire JSON codecs for events and filters.

Architecture follows a **diamond DAG** dependency structure where imports
flow strictly downward:

```text
                nips           NIP-01 protocol logic (pure functions)
             /   |   \
          core   |   utils     Exceptions, logging, config / crypto, keys
             \   |   /
              models           Pure frozen dataclasses (zero I/O)
```

Attributes:
    models: Pure frozen dataclasses. Zero I/O, depends only on stdlib.
    core: Exception hierarchy, structured logging, YAML loading.
    utils: Crypto backend (hash, Schnorr) and key helpers.
    nips: NIP-01 ids, signing, validation, matching and JSON codecs.

Note:
    For lightweight usage, import directly from subpackages::

        from roots.models import Event, Filter
        from roots.nips.nip01 import validate, matches

    Top-level imports (``from roots import Event``) use lazy loading
    and resolve on first access.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("roots")

__all__ = [
    "ABSENT",
    "CryptoBackend",
    "Event",
    "EventValidator",
    "Filter",
    "Logger",
    "RootsError",
    "ValidationError",
    "ValidationErrorKind",
    "ValidatorConfig",
    "check",
    "default_backend",
    "event_json",
    "filter_json",
    "finalize_event",
    "generate_private_key",
    "get_id",
    "get_public_key",
    "match_any",
    "matches",
    "serialize",
    "sign",
    "validate",
    "validate_id",
    "validate_signature",
    "validate_structure",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "ABSENT": ("roots.models", "ABSENT"),
    "Event": ("roots.models", "Event"),
    "Filter": ("roots.models", "Filter"),
    "Logger": ("roots.core", "Logger"),
    "RootsError": ("roots.core", "RootsError"),
    "ValidationError": ("roots.core", "ValidationError"),
    "ValidationErrorKind": ("roots.core", "ValidationErrorKind"),
    "CryptoBackend": ("roots.utils", "CryptoBackend"),
    "default_backend": ("roots.utils", "default_backend"),
    "generate_private_key": ("roots.utils", "generate_private_key"),
    "get_public_key": ("roots.utils", "get_public_key"),
    "EventValidator": ("roots.nips.nip01", "EventValidator"),
    "ValidatorConfig": ("roots.nips.nip01", "ValidatorConfig"),
    "check": ("roots.nips.nip01", "check"),
    "event_json": ("roots.nips.nip01", "event_json"),
    "filter_json": ("roots.nips.nip01", "filter_json"),
    "finalize_event": ("roots.nips.nip01", "finalize_event"),
    "get_id": ("roots.nips.nip01", "get_id"),
    "match_any": ("roots.nips.nip01", "match_any"),
    "matches": ("roots.nips.nip01", "matches"),
    "serialize": ("roots.nips.nip01", "serialize"),
    "sign": ("roots.nips.nip01", "sign"),
    "validate": ("roots.nips.nip01", "validate"),
    "validate_id": ("roots.nips.nip01", "validate_id"),
    "validate_signature": ("roots.nips.nip01", "validate_signature"),
    "validate_structure": ("roots.nips.nip01", "validate_structure"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'roots' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
