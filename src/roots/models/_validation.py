"""Shared validation helpers for frozen dataclass models.

Private module -- not part of the public API. Used exclusively by
``__post_init__`` methods in sibling model modules to enforce runtime
type constraints. Protocol-level checks (hex patterns, tag arity) live in
[roots.nips.nip01.validator][] instead: a model only guarantees that its
fields have the right Python types.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


def validate_instance(value: Any, expected: type, name: str) -> None:
    """Raise ``TypeError`` if *value* is not an instance of *expected*."""
    if not isinstance(value, expected):
        article = "an" if expected.__name__[0] in "AEIOUaeiou" else "a"
        raise TypeError(f"{name} must be {article} {expected.__name__}, got {type(value).__name__}")


def validate_int(value: Any, name: str) -> None:
    """Raise ``TypeError`` if *value* is not an ``int`` (``bool`` excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def validate_str_sequence(value: Any, name: str) -> None:
    """Raise ``TypeError`` unless *value* is a list or tuple of ``str``."""
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise TypeError(f"{name} must be a sequence of str, got {type(value).__name__}")
    for item in value:
        if not isinstance(item, str):
            raise TypeError(f"{name} must contain only str, got {type(item).__name__}")


def validate_int_sequence(value: Any, name: str) -> None:
    """Raise ``TypeError`` unless *value* is a list or tuple of ``int``."""
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise TypeError(f"{name} must be a sequence of int, got {type(value).__name__}")
    for item in value:
        validate_int(item, name)


def validate_mapping(value: Any, name: str) -> None:
    """Raise ``TypeError`` if *value* is not a ``Mapping`` with ``str`` keys."""
    if not isinstance(value, Mapping):
        raise TypeError(f"{name} must be a Mapping, got {type(value).__name__}")
    for key in value:
        if not isinstance(key, str):
            raise TypeError(f"{name} keys must be str, got {type(key).__name__}")
