"""
Unit tests for nips.nip01.validator module.

Tests:
- validate_structure() field formats and tag arity
- validate_id() recomputation, empty id and mismatch
- validate_signature() verification and malformed inputs
- validate() / check() full pipeline
- EventValidator stage toggles, config loading and logging
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from roots.core.exceptions import (
    ConfigurationError,
    FailedIDCompError,
    IDMismatchError,
    InvalidSigError,
    MalformedIDError,
    MalformedPubKeyError,
    MalformedSigError,
    MalformedTagError,
    NoEventIDError,
    ValidationError,
    ValidationErrorKind,
)
from roots.core.logger import Logger
from roots.models import Event
from roots.nips.nip01.configs import StagesConfig, ValidatorConfig
from roots.nips.nip01.id import get_id
from roots.nips.nip01.validator import (
    EventValidator,
    check,
    validate,
    validate_id,
    validate_signature,
    validate_structure,
)
from roots.utils.crypto import default_backend
from tests.fixtures.events import (
    TAGGED_EVENT_ID,
    TAGGED_EVENT_SIG,
    TEST_EVENT_ID,
    TEST_EVENT_SIG,
    TEST_PUBLIC_KEY,
    make_event,
)


OTHER_SIG = (
    "9e43cbcf7e828a21c53fa35371ee79bffbfd7a3063ae46fc05ec623dd3186667"
    "c57e3d006488015e19247df35eb41c61013e051aa87860e23fa5ffbd44120482"
)

# 2^256 - 1 is above the field prime, so it is no x coordinate on the curve.
OFF_CURVE_PUBKEY = "f" * 64


def _broken_hash(data: bytes) -> bytes:
    raise RuntimeError("hash unavailable")


# =============================================================================
# validate_structure()
# =============================================================================


STRUCTURE_CASES = [
    pytest.param({"pubkey": ""}, MalformedPubKeyError, id="empty-pubkey"),
    pytest.param({"pubkey": "abc123"}, MalformedPubKeyError, id="short-pubkey"),
    pytest.param({"pubkey": TEST_EVENT_ID + "abc"}, MalformedPubKeyError, id="long-pubkey"),
    pytest.param(
        {"pubkey": "zyx-!2e6158744ca03508bbb4c90f9dbb0d6e88fefbfaa511d5ab24b4e3c48ad"},
        MalformedPubKeyError,
        id="non-hex-pubkey",
    ),
    pytest.param({"pubkey": TEST_EVENT_ID.upper()}, MalformedPubKeyError, id="uppercase-pubkey"),
    pytest.param({"pubkey": TEST_PUBLIC_KEY + "\n"}, MalformedPubKeyError, id="newline-pubkey"),
    pytest.param({"id": ""}, MalformedIDError, id="empty-id"),
    pytest.param({"id": "abc123"}, MalformedIDError, id="short-id"),
    pytest.param({"id": TEST_EVENT_ID.upper()}, MalformedIDError, id="uppercase-id"),
    pytest.param({"sig": ""}, MalformedSigError, id="empty-sig"),
    pytest.param({"sig": "abc123"}, MalformedSigError, id="short-sig"),
    pytest.param({"tags": [[]]}, MalformedTagError, id="empty-tag"),
    pytest.param({"tags": [["a"]]}, MalformedTagError, id="single-element-tag"),
    pytest.param(
        {"tags": [["a", "value"], ["b"]]}, MalformedTagError, id="good-tag-then-short-tag"
    ),
]


class TestValidateStructure:
    """Structural checks, in pubkey -> id -> sig -> tags order."""

    def test_accepts_reference_event(self, signed_event: Event) -> None:
        validate_structure(signed_event)

    @pytest.mark.parametrize(("overrides", "error"), STRUCTURE_CASES)
    def test_rejects(self, overrides: dict[str, object], error: type[ValidationError]) -> None:
        with pytest.raises(error) as exc_info:
            validate_structure(make_event(**overrides))
        assert str(exc_info.value) == error.default_message

    def test_pubkey_checked_first(self) -> None:
        event = make_event(pubkey="", id="", sig="", tags=[[]])
        with pytest.raises(MalformedPubKeyError):
            validate_structure(event)

    def test_id_checked_before_sig(self) -> None:
        with pytest.raises(MalformedIDError):
            validate_structure(make_event(id="", sig=""))

    def test_sig_checked_before_tags(self) -> None:
        with pytest.raises(MalformedSigError):
            validate_structure(make_event(sig="", tags=[["a"]]))

    def test_does_not_check_id_or_signature(self) -> None:
        validate_structure(make_event(content="tampered", sig="00" * 64))


# =============================================================================
# validate_id()
# =============================================================================


class TestValidateID:
    """Stored id against recomputed id."""

    def test_accepts_matching_id(self, signed_event: Event) -> None:
        validate_id(signed_event)

    def test_empty_id(self, signed_event: Event) -> None:
        with pytest.raises(NoEventIDError, match="event id is empty"):
            validate_id(signed_event.replace(id=""))

    def test_mismatch(self, signed_event: Event) -> None:
        stored = "0" * 64
        with pytest.raises(IDMismatchError, match="does not match computed id") as exc_info:
            validate_id(signed_event.replace(id=stored))
        assert exc_info.value.event_id == stored
        assert exc_info.value.computed_id == TEST_EVENT_ID

    def test_tampered_content(self, signed_event: Event) -> None:
        with pytest.raises(IDMismatchError):
            validate_id(signed_event.replace(content="hello world!"))

    def test_failed_computation(self, signed_event: Event) -> None:
        backend = dataclasses.replace(default_backend(), hash=_broken_hash)
        with pytest.raises(FailedIDCompError) as exc_info:
            validate_id(signed_event, backend=backend)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_computation_failure_precedes_empty_id(self, signed_event: Event) -> None:
        backend = dataclasses.replace(default_backend(), hash=_broken_hash)
        with pytest.raises(FailedIDCompError):
            validate_id(signed_event.replace(id=""), backend=backend)


# =============================================================================
# validate_signature()
# =============================================================================


class TestValidateSignature:
    """Schnorr verification of the id."""

    def test_accepts_valid_signature(self, signed_event: Event) -> None:
        validate_signature(signed_event)

    def test_rejects_invalid_signature(self, signed_event: Event) -> None:
        with pytest.raises(InvalidSigError, match="event signature is invalid"):
            validate_signature(signed_event.replace(sig=OTHER_SIG))

    def test_rejects_signature_for_other_id(self, signed_event: Event) -> None:
        with pytest.raises(InvalidSigError):
            validate_signature(signed_event.replace(id=TAGGED_EVENT_ID))

    def test_off_curve_pubkey_is_invalid_signature(self, signed_event: Event) -> None:
        with pytest.raises(InvalidSigError):
            validate_signature(signed_event.replace(pubkey=OFF_CURVE_PUBKEY))

    def test_off_curve_pubkey_with_valid_id(self) -> None:
        event = make_event(pubkey=OFF_CURVE_PUBKEY, sig="ab" * 64)
        event = event.replace(id=get_id(event))
        validate_structure(event)
        validate_id(event)
        with pytest.raises(InvalidSigError):
            validate(event)

    @pytest.mark.parametrize(
        ("overrides", "match"),
        [
            pytest.param({"id": "badeventid"}, "non-hexadecimal", id="bad-event-id"),
            pytest.param({"sig": "badeventsignature"}, "non-hexadecimal", id="bad-signature"),
            pytest.param({"pubkey": "badpublickey"}, "non-hexadecimal", id="bad-public-key"),
            pytest.param({"sig": "abc123"}, "signature", id="malformed-signature"),
            pytest.param({"pubkey": "abc123"}, "public key", id="malformed-public-key"),
        ],
    )
    def test_malformed_inputs_raise_value_error(
        self, signed_event: Event, overrides: dict[str, str], match: str
    ) -> None:
        with pytest.raises(ValueError, match=match):
            validate_signature(signed_event.replace(**overrides))


# =============================================================================
# validate() / check()
# =============================================================================


class TestValidate:
    """Full three-stage pipeline."""

    def test_validates_reference_event(self, signed_event: Event) -> None:
        validate(signed_event)

    def test_validates_complete_event(self) -> None:
        event = make_event(
            id=TAGGED_EVENT_ID,
            tags=[["a", "value"], ["b", "value", "optional"]],
            content="valid event",
            sig=TAGGED_EVENT_SIG,
        )
        validate(event)

    def test_structure_before_id(self, signed_event: Event) -> None:
        with pytest.raises(MalformedTagError):
            validate(signed_event.replace(tags=[["a"]]))

    def test_id_before_signature(self, signed_event: Event) -> None:
        with pytest.raises(IDMismatchError):
            validate(signed_event.replace(content="changed", sig=OTHER_SIG))

    def test_signature_stage(self, signed_event: Event) -> None:
        with pytest.raises(InvalidSigError):
            validate(signed_event.replace(sig=OTHER_SIG))

    def test_empty_id_caught_by_structure(self, signed_event: Event) -> None:
        with pytest.raises(MalformedIDError):
            validate(signed_event.replace(id=""))


class TestCheck:
    """Non-raising pipeline returning ValidationLogs."""

    def test_passed(self, signed_event: Event) -> None:
        result = check(signed_event)
        assert result.success
        assert result.kind is None

    @pytest.mark.parametrize(
        ("overrides", "kind"),
        [
            ({"pubkey": ""}, ValidationErrorKind.MALFORMED_PUBKEY),
            ({"id": "abc"}, ValidationErrorKind.MALFORMED_ID),
            ({"sig": "abc"}, ValidationErrorKind.MALFORMED_SIG),
            ({"tags": [["e"]]}, ValidationErrorKind.MALFORMED_TAG),
            ({"content": "changed"}, ValidationErrorKind.ID_MISMATCH),
            ({"sig": OTHER_SIG}, ValidationErrorKind.INVALID_SIG),
        ],
    )
    def test_failure_kinds(self, overrides: dict[str, object], kind: ValidationErrorKind) -> None:
        result = check(make_event(**overrides))
        assert not result
        assert result.kind is kind
        assert result.reason

    def test_off_curve_pubkey_kind(self) -> None:
        event = make_event(pubkey=OFF_CURVE_PUBKEY, sig="ab" * 64)
        result = check(event.replace(id=get_id(event)))
        assert not result
        assert result.kind is ValidationErrorKind.INVALID_SIG

    def test_failed_computation_kind(self, signed_event: Event) -> None:
        backend = dataclasses.replace(default_backend(), hash=_broken_hash)
        assert check(signed_event, backend=backend).kind is ValidationErrorKind.FAILED_ID_COMP


# =============================================================================
# EventValidator
# =============================================================================


class TestEventValidatorConfig:
    """Construction and configuration loading."""

    def test_defaults(self) -> None:
        validator = EventValidator()
        assert validator.config == ValidatorConfig()
        assert validator.backend is default_backend()

    def test_explicit_backend(self) -> None:
        backend = dataclasses.replace(default_backend(), hash=_broken_hash)
        assert EventValidator(backend=backend).backend is backend

    def test_from_dict(self) -> None:
        validator = EventValidator.from_dict({"stages": {"signature": False}})
        assert validator.config.stages == StagesConfig(signature=False)

    def test_from_dict_invalid(self) -> None:
        with pytest.raises(ConfigurationError):
            EventValidator.from_dict({"stages": {"unknown": True}})

    def test_from_yaml(self, write_yaml: Callable[..., Path]) -> None:
        path = write_yaml("stages:\n  id: false\nlogging:\n  name: relay.ingest\n")
        validator = EventValidator.from_yaml(path)
        assert validator.config.stages.id is False
        assert validator.config.logging.name == "relay.ingest"


class TestEventValidatorStages:
    """Enabled stages decide which failures are detected."""

    def test_all_stages_accept(self, signed_event: Event) -> None:
        EventValidator().validate(signed_event)

    def test_all_stages_reject(self, signed_event: Event) -> None:
        with pytest.raises(InvalidSigError):
            EventValidator().validate(signed_event.replace(sig=OTHER_SIG))

    def test_signature_disabled(self, signed_event: Event) -> None:
        validator = EventValidator(ValidatorConfig(stages=StagesConfig(signature=False)))
        validator.validate(signed_event.replace(sig=OTHER_SIG))

    def test_id_disabled(self, signed_event: Event) -> None:
        validator = EventValidator(
            ValidatorConfig(stages=StagesConfig(id=False, signature=False))
        )
        validator.validate(signed_event.replace(content="changed"))

    def test_structure_disabled(self, signed_event: Event) -> None:
        validator = EventValidator(
            ValidatorConfig(stages=StagesConfig(structure=False, signature=False))
        )
        with pytest.raises(NoEventIDError):
            validator.validate(signed_event.replace(id=""))

    def test_structure_only(self, signed_event: Event) -> None:
        validator = EventValidator.from_dict({"stages": {"id": False, "signature": False}})
        validator.validate(signed_event.replace(content="changed", sig=OTHER_SIG))
        with pytest.raises(MalformedTagError):
            validator.validate(signed_event.replace(tags=[["a"]]))

    def test_check(self, signed_event: Event) -> None:
        validator = EventValidator()
        assert validator.check(signed_event)
        result = validator.check(signed_event.replace(sig=OTHER_SIG))
        assert result.kind is ValidationErrorKind.INVALID_SIG

    def test_backend_used(self, signed_event: Event) -> None:
        backend = dataclasses.replace(default_backend(), hash=_broken_hash)
        result = EventValidator(backend=backend).check(signed_event)
        assert result.kind is ValidationErrorKind.FAILED_ID_COMP


class TestEventValidatorLogging:
    """Verdicts are logged at debug level."""

    def test_accepted(self, signed_event: Event, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="roots.validator"):
            EventValidator().validate(signed_event)
        record = caplog.records[-1]
        assert record.name == "roots.validator"
        assert record.getMessage() == "event_accepted"
        assert record.structured_kv == {"event_id": TEST_EVENT_ID[:16]}

    def test_rejected(self, signed_event: Event, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="roots.validator"):
            EventValidator().check(signed_event.replace(sig=OTHER_SIG))
        record = caplog.records[-1]
        assert record.getMessage() == "event_rejected"
        assert record.structured_kv["kind"] is ValidationErrorKind.INVALID_SIG
        assert record.structured_kv["reason"] == "event signature is invalid"

    def test_custom_logger(self, signed_event: Event, caplog: pytest.LogCaptureFixture) -> None:
        logger = Logger("relay.ingest")
        with caplog.at_level(logging.DEBUG, logger="relay.ingest"):
            EventValidator(logger=logger).validate(signed_event)
        assert caplog.records[-1].name == "relay.ingest"

    def test_configured_logger_name(
        self, signed_event: Event, caplog: pytest.LogCaptureFixture
    ) -> None:
        validator = EventValidator.from_dict({"logging": {"name": "relay.ingest.v2"}})
        with caplog.at_level(logging.DEBUG, logger="relay.ingest.v2"):
            validator.validate(signed_event)
        assert caplog.records[-1].name == "relay.ingest.v2"

    def test_quiet_above_debug(self, signed_event: Event, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="roots.validator"):
            EventValidator().validate(signed_event)
        assert not [r for r in caplog.records if r.name == "roots.validator"]

    def test_signature_not_logged(self, signed_event: Event, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="roots.validator"):
            EventValidator().validate(signed_event)
        assert TEST_EVENT_SIG not in caplog.text
