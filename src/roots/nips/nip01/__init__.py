"""
NIP-01 basic protocol: events, ids, signatures and filters.

Attributes:
    id: Canonical serialization and id derivation
        ([serialize()][roots.nips.nip01.id.serialize],
        [get_id()][roots.nips.nip01.id.get_id]).
    signer: Deterministic Schnorr signing
        ([sign()][roots.nips.nip01.signer.sign],
        [finalize_event()][roots.nips.nip01.signer.finalize_event]).
    validator: Structure, id and signature validation, plus the
        configurable [EventValidator][roots.nips.nip01.validator.EventValidator].
    event_json: Event wire JSON codec.
    filter_match: [matches()][roots.nips.nip01.filter_match.matches] and
        [match_any()][roots.nips.nip01.filter_match.match_any].
    filter_json: Filter wire JSON codec.

Examples:
    ```python
    from roots.nips.nip01 import event_json, filter_json, matches, validate

    event = event_json.loads(raw_event)
    validate(event)
    if matches(filter_json.loads(raw_filter), event):
        ...
    ```
"""

from . import event_json, filter_json
from .configs import LoggingConfig, StagesConfig, ValidatorConfig
from .filter_match import match_any, matches
from .id import get_id, serialize
from .logs import ValidationLogs
from .signer import finalize_event, sign
from .validator import (
    EventValidator,
    check,
    validate,
    validate_id,
    validate_signature,
    validate_structure,
)


__all__ = [
    "EventValidator",
    "LoggingConfig",
    "StagesConfig",
    "ValidationLogs",
    "ValidatorConfig",
    "check",
    "event_json",
    "filter_json",
    "finalize_event",
    "get_id",
    "match_any",
    "matches",
    "serialize",
    "sign",
    "validate",
    "validate_id",
    "validate_signature",
    "validate_structure",
]
