"""Unit tests for nips.nip01.logs module."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from roots.core.exceptions import IDMismatchError, InvalidSigError, ValidationErrorKind
from roots.nips.nip01.logs import ValidationLogs


class TestValidationLogs:
    def test_passed(self) -> None:
        result = ValidationLogs.passed()
        assert result.success is True
        assert result.reason is None
        assert result.kind is None
        assert result

    def test_from_error(self) -> None:
        result = ValidationLogs.from_error(InvalidSigError())
        assert result.success is False
        assert result.kind is ValidationErrorKind.INVALID_SIG
        assert result.reason == "event signature is invalid"
        assert not result

    def test_from_error_uses_message(self) -> None:
        result = ValidationLogs.from_error(IDMismatchError("a" * 64, "b" * 64))
        assert result.kind is ValidationErrorKind.ID_MISMATCH
        assert "does not match computed id" in result.reason

    def test_kind_on_success_rejected(self) -> None:
        with pytest.raises(PydanticValidationError, match="kind must be None"):
            ValidationLogs(success=True, kind=ValidationErrorKind.INVALID_SIG)

    def test_missing_kind_on_failure_rejected(self) -> None:
        with pytest.raises(PydanticValidationError, match="kind is required"):
            ValidationLogs(success=False, reason="bad")

    def test_kind_from_string(self) -> None:
        result = ValidationLogs.from_dict(
            {"success": False, "reason": "bad", "kind": "malformed_tag"}
        )
        assert result.kind is ValidationErrorKind.MALFORMED_TAG

    def test_to_dict(self) -> None:
        assert ValidationLogs.from_error(InvalidSigError()).to_dict() == {
            "success": False,
            "reason": "event signature is invalid",
            "kind": "invalid_sig",
        }
        assert ValidationLogs.passed().to_dict() == {"success": True}
