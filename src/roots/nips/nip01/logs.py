"""
NIP-01 event validation result model.

Returned by the non-raising [check()][roots.nips.nip01.validator.check]
API. A failed result carries the
[ValidationErrorKind][roots.core.exceptions.ValidationErrorKind] of the
first check that failed, so callers can branch on the kind:

```python
result = check(event)
match result.kind:
    case None:
        accept(event)
    case ValidationErrorKind.INVALID_SIG:
        ban(event.pubkey)
    case _:
        reject(event, result.reason)
```
"""

from __future__ import annotations

from typing import Self

from pydantic import model_validator

from roots.core.exceptions import ValidationError, ValidationErrorKind
from roots.nips.base import BaseLogs


class ValidationLogs(BaseLogs):
    """Outcome of validating one event.

    Inherits success/reason validation from
    [BaseLogs][roots.nips.base.BaseLogs] and adds:

    * ``kind`` -- ``None`` on success, the failing check's kind otherwise.
    """

    kind: ValidationErrorKind | None = None

    @model_validator(mode="after")
    def validate_kind(self) -> Self:
        """Enforce success/kind consistency."""
        if self.success and self.kind is not None:
            raise ValueError("kind must be None when success is True")
        if not self.success and self.kind is None:
            raise ValueError("kind is required when success is False")
        return self

    @classmethod
    def passed(cls) -> Self:
        return cls(success=True)

    @classmethod
    def from_error(cls, error: ValidationError) -> Self:
        """Build a failed result from a raised validation error."""
        return cls(success=False, reason=str(error), kind=error.kind)
