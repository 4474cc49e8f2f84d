"""
Shared base classes for NIP result models.

[BaseLogs][roots.nips.base.BaseLogs] is the Pydantic base for operation
results that either succeed or fail with a reason. NIP packages subclass
it to attach protocol-specific detail (see
[ValidationLogs][roots.nips.nip01.logs.ValidationLogs]).
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, StrictBool, model_validator


class BaseLogs(BaseModel):
    """Base class for operation logs with success/reason validation.

    Enforces semantic consistency between the ``success`` flag and the
    ``reason`` message:

    * When ``success=True``, ``reason`` must be ``None``.
    * When ``success=False``, ``reason`` is required (non-None string).
    """

    model_config = ConfigDict(frozen=True)

    success: StrictBool
    reason: str | None = None

    @model_validator(mode="after")
    def validate_semantic(self) -> Self:
        """Enforce success/reason consistency."""
        if self.success and self.reason is not None:
            raise ValueError("reason must be None when success is True")
        if not self.success and self.reason is None:
            raise ValueError("reason is required when success is False")
        return self

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create an instance from a dictionary with strict validation."""
        return cls.model_validate(data)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary, excluding fields with ``None`` values."""
        return self.model_dump(exclude_none=True, mode="json")

    def __bool__(self) -> bool:
        return self.success
