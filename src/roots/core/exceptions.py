"""roots exception hierarchy.

Provides typed exceptions for every protocol check so that callers can
catch a specific failure instead of matching on message text. Each
[ValidationError][roots.core.exceptions.ValidationError] subclass also
exposes a [ValidationErrorKind][roots.core.exceptions.ValidationErrorKind]
tag, used by the non-raising
[check()][roots.nips.nip01.validator.check] API.

Exception hierarchy:

```text
RootsError (base -- never raised directly)
├── ConfigurationError      -- config validation, bad YAML
└── ValidationError         -- event or key failed a protocol check
    ├── MalformedPubKeyError  -- pubkey is not 64 lowercase hex
    ├── MalformedPrivKeyError -- private key is not 64 lowercase hex
    ├── MalformedIDError      -- id is not 64 hex / not 32 bytes
    ├── MalformedSigError     -- sig is not 128 hex
    ├── MalformedTagError     -- a tag has fewer than two elements
    ├── NoEventIDError        -- id is the empty string
    ├── FailedIDCompError     -- hashing the event failed
    ├── IDMismatchError       -- stored id differs from computed id
    └── InvalidSigError       -- Schnorr verification returned False
```

Note:
    Hex-decoding errors and errors raised by the signature primitive are
    **not** wrapped in this hierarchy. They propagate unchanged because
    their messages carry primitive-specific detail.

See Also:
    [roots.nips.nip01.validator][]: Raises the validation errors.
    [roots.nips.nip01.signer][]: Raises key and id errors before signing.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class ValidationErrorKind(StrEnum):
    """Tag identifying which protocol check failed.

    Values are stable strings suitable for logs and metrics labels.
    """

    MALFORMED_PUBKEY = "malformed_pubkey"
    MALFORMED_PRIVKEY = "malformed_privkey"
    MALFORMED_ID = "malformed_id"
    MALFORMED_SIG = "malformed_sig"
    MALFORMED_TAG = "malformed_tag"
    NO_EVENT_ID = "no_event_id"
    FAILED_ID_COMP = "failed_id_comp"
    ID_MISMATCH = "id_mismatch"
    INVALID_SIG = "invalid_sig"


class RootsError(Exception):
    """Base exception for all roots errors.

    Never raised directly -- always use a specific subclass.
    """


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(RootsError):
    """Invalid or missing configuration (YAML file, env vars).

    See Also:
        [load_yaml()][roots.core.yaml.load_yaml]: YAML loading function
            whose output feeds the configuration models.
    """


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class ValidationError(RootsError):
    """Base for all protocol validation failures.

    Subclasses set ``kind`` and ``default_message``; instantiating with no
    argument uses the default message.
    """

    kind: ClassVar[ValidationErrorKind]
    default_message: ClassVar[str] = "validation failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class MalformedPubKeyError(ValidationError):
    """Public key is not 64 lowercase hex characters."""

    kind = ValidationErrorKind.MALFORMED_PUBKEY
    default_message = "public key must be 64 lowercase hex characters"


class MalformedPrivKeyError(ValidationError):
    """Private key is not 64 lowercase hex characters."""

    kind = ValidationErrorKind.MALFORMED_PRIVKEY
    default_message = "private key must be 64 lowercase hex characters"


class MalformedIDError(ValidationError):
    """Event id is not 64 hex characters (or not 32 bytes once decoded)."""

    kind = ValidationErrorKind.MALFORMED_ID
    default_message = "event id must be 64 hex characters"


class MalformedSigError(ValidationError):
    """Event signature is not 128 hex characters."""

    kind = ValidationErrorKind.MALFORMED_SIG
    default_message = "event signature must be 128 hex characters"


class MalformedTagError(ValidationError):
    """An event tag has fewer than two elements."""

    kind = ValidationErrorKind.MALFORMED_TAG
    default_message = "tags must contain at least two elements"


class NoEventIDError(ValidationError):
    """Event id field is empty."""

    kind = ValidationErrorKind.NO_EVENT_ID
    default_message = "event id is empty"


class FailedIDCompError(ValidationError):
    """Event id could not be computed.

    The original exception is available as ``__cause__``.
    """

    kind = ValidationErrorKind.FAILED_ID_COMP
    default_message = "failed to compute event id"


class IDMismatchError(ValidationError):
    """Stored event id does not match the id computed from the event fields.

    Attributes:
        event_id: The id stored on the event.
        computed_id: The id derived from the event fields.
    """

    kind = ValidationErrorKind.ID_MISMATCH
    default_message = "event id does not match computed id"

    def __init__(self, event_id: str, computed_id: str) -> None:
        super().__init__(f'event id "{event_id}" does not match computed id "{computed_id}"')
        self.event_id = event_id
        self.computed_id = computed_id


class InvalidSigError(ValidationError):
    """Event signature failed cryptographic verification."""

    kind = ValidationErrorKind.INVALID_SIG
    default_message = "event signature is invalid"
