"""Core layer: exceptions, structured logging and YAML loading.

Sits in the middle of the diamond DAG -- depends on nothing inside roots
and is used by ``roots.utils`` and ``roots.nips``.

Attributes:
    RootsError: Base of the exception hierarchy. See
        [roots.core.exceptions][].
    ValidationErrorKind: Tag identifying which protocol check failed.
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][roots.core.logger.Logger].
    load_yaml: Safe YAML loading with ``yaml.safe_load()``.
        See [load_yaml()][roots.core.yaml.load_yaml].
"""

from .exceptions import (
    ConfigurationError,
    FailedIDCompError,
    IDMismatchError,
    InvalidSigError,
    MalformedIDError,
    MalformedPrivKeyError,
    MalformedPubKeyError,
    MalformedSigError,
    MalformedTagError,
    NoEventIDError,
    RootsError,
    ValidationError,
    ValidationErrorKind,
)
from .logger import Logger, StructuredFormatter, format_kv_pairs, setup_logging
from .yaml import load_yaml


__all__ = [
    "ConfigurationError",
    "FailedIDCompError",
    "IDMismatchError",
    "InvalidSigError",
    "Logger",
    "MalformedIDError",
    "MalformedPrivKeyError",
    "MalformedPubKeyError",
    "MalformedSigError",
    "MalformedTagError",
    "NoEventIDError",
    "RootsError",
    "StructuredFormatter",
    "ValidationError",
    "ValidationErrorKind",
    "format_kv_pairs",
    "load_yaml",
    "setup_logging",
]
