"""
Three-stage NIP-01 event validation.

Stages run in a fixed order and each stops at its first failure:

1. [validate_structure()][roots.nips.nip01.validator.validate_structure] --
   hex formats of ``pubkey``, ``id`` and ``sig``, then tag arity.
2. [validate_id()][roots.nips.nip01.validator.validate_id] -- the stored
   ``id`` equals the id derived from the other fields.
3. [validate_signature()][roots.nips.nip01.validator.validate_signature] --
   the Schnorr signature over ``id`` verifies against ``pubkey``.

Each stage is callable on its own, e.g. structure-only checks before
spending time on signature verification.
[validate()][roots.nips.nip01.validator.validate] runs all three and raises
the first error; [check()][roots.nips.nip01.validator.check] returns a
[ValidationLogs][roots.nips.nip01.logs.ValidationLogs] instead of raising.

Note:
    Tags shorter than two elements are rejected here but silently skipped
    by [matches()][roots.nips.nip01.filter_match.matches]. The two paths
    differ on purpose: validation decides acceptance, matching only reads.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Self

from roots.core.exceptions import (
    FailedIDCompError,
    IDMismatchError,
    InvalidSigError,
    MalformedIDError,
    MalformedPubKeyError,
    MalformedSigError,
    MalformedTagError,
    NoEventIDError,
    ValidationError,
)
from roots.core.logger import Logger
from roots.models.constants import HEX_64_PATTERN, HEX_128_PATTERN
from roots.models.event import Event
from roots.utils.crypto import CryptoBackend, resolve_backend

from .configs import ValidatorConfig
from .id import get_id
from .logs import ValidationLogs


def validate_structure(event: Event) -> None:
    """Check field formats and tag arity.

    Raises:
        MalformedPubKeyError: If ``pubkey`` is not 64 lowercase hex.
        MalformedIDError: If ``id`` is not 64 lowercase hex.
        MalformedSigError: If ``sig`` is not 128 lowercase hex.
        MalformedTagError: If any tag has fewer than two elements.
    """
    if not HEX_64_PATTERN.fullmatch(event.pubkey):
        raise MalformedPubKeyError
    if not HEX_64_PATTERN.fullmatch(event.id):
        raise MalformedIDError
    if not HEX_128_PATTERN.fullmatch(event.sig):
        raise MalformedSigError
    for tag in event.tags:
        if len(tag) < 2:
            raise MalformedTagError


def validate_id(event: Event, *, backend: CryptoBackend | None = None) -> None:
    """Check that the stored id matches the id derived from the event fields.

    Raises:
        FailedIDCompError: If computing the id raised. The original
            exception is chained as ``__cause__``.
        NoEventIDError: If the stored id is empty.
        IDMismatchError: If the stored and computed ids differ.
    """
    try:
        computed_id = get_id(event, backend=backend)
    except Exception as e:
        raise FailedIDCompError from e

    if event.id == "":
        raise NoEventIDError

    if computed_id != event.id:
        raise IDMismatchError(event.id, computed_id)


def validate_signature(event: Event, *, backend: CryptoBackend | None = None) -> None:
    """Verify the Schnorr signature of ``id`` against ``pubkey``.

    Raises:
        InvalidSigError: If verification returns False, including for a
            ``pubkey`` that is not a point on the curve.
        ValueError: If ``id``, ``sig`` or ``pubkey`` is not valid hex or
            has the wrong length. Raised by the hex decoder or the
            signature primitive and not wrapped.
    """
    id_bytes = bytes.fromhex(event.id)
    sig_bytes = bytes.fromhex(event.sig)
    pubkey_bytes = bytes.fromhex(event.pubkey)

    if not resolve_backend(backend).verify(sig_bytes, id_bytes, pubkey_bytes):
        raise InvalidSigError


def validate(event: Event, *, backend: CryptoBackend | None = None) -> None:
    """Run structure, id and signature validation in order.

    Raises:
        ValidationError: The first failure encountered (see each stage).
    """
    validate_structure(event)
    validate_id(event, backend=backend)
    validate_signature(event, backend=backend)


def check(event: Event, *, backend: CryptoBackend | None = None) -> ValidationLogs:
    """Run [validate()][roots.nips.nip01.validator.validate] without raising.

    Only [ValidationError][roots.core.exceptions.ValidationError] is turned
    into a failed result; hex-decoding and primitive errors still raise.
    """
    try:
        validate(event, backend=backend)
    except ValidationError as e:
        return ValidationLogs.from_error(e)
    return ValidationLogs.passed()


class EventValidator:
    """Configurable validation pipeline with structured logging.

    Wraps the stage functions with a [ValidatorConfig][roots.nips.nip01.configs.ValidatorConfig]
    selecting which stages run, an explicit crypto backend, and a
    [Logger][roots.core.logger.Logger] recording each verdict at debug
    level. Holds no mutable state; one instance can be shared across
    threads.

    Examples:
        ```python
        validator = EventValidator.from_yaml("config/validator.yaml")
        result = validator.check(event)
        if not result:
            print(result.kind, result.reason)
        ```
    """

    def __init__(
        self,
        config: ValidatorConfig | None = None,
        *,
        backend: CryptoBackend | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._config = config or ValidatorConfig()
        self._backend = resolve_backend(backend)
        self._logger = logger or Logger(
            self._config.logging.name, json_output=self._config.logging.json_output
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any], **kwargs: Any) -> Self:
        return cls(ValidatorConfig.from_dict(data), **kwargs)

    @classmethod
    def from_yaml(cls, config_path: str | Path, **kwargs: Any) -> Self:
        return cls(ValidatorConfig.from_yaml(config_path), **kwargs)

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    @property
    def backend(self) -> CryptoBackend:
        return self._backend

    def validate(self, event: Event) -> None:
        """Run the enabled stages in order, raising the first failure."""
        stages = self._config.stages
        try:
            if stages.structure:
                validate_structure(event)
            if stages.id:
                validate_id(event, backend=self._backend)
            if stages.signature:
                validate_signature(event, backend=self._backend)
        except ValidationError as e:
            self._logger.debug(
                "event_rejected", event_id=event.id[:16], kind=e.kind, reason=str(e)
            )
            raise
        self._logger.debug("event_accepted", event_id=event.id[:16])

    def check(self, event: Event) -> ValidationLogs:
        """Non-raising variant of [validate()][roots.nips.nip01.validator.EventValidator.validate]."""
        try:
            self.validate(event)
        except ValidationError as e:
            return ValidationLogs.from_error(e)
        return ValidationLogs.passed()
