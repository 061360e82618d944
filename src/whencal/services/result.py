"""Service results handed from the service layer to the CLI.

Every service method returns a :class:`ServiceResult`. A successful result
carries an op-specific ``data`` payload plus any skipped-line warnings; a
failed one carries exactly one :class:`ServiceError` and no data.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

Operation = Literal["report", "check", "init", "edit"]


class ServiceError(BaseModel):
    """Why an operation failed: a stable ``code`` for scripts, a message for people."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: bool
    op: Operation
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @model_validator(mode="after")
    def _error_iff_failed(self) -> ServiceResult:
        if self.ok and self.error is not None:
            raise ValueError("a successful result cannot carry an error")
        if not self.ok and self.error is None:
            raise ValueError("a failed result needs an error")
        return self

    @classmethod
    def failure(cls, op: Operation, code: str, message: str, **detail: Any) -> ServiceResult:
        """Build a failed result; keyword arguments become ``error.detail``."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))

    @classmethod
    def from_error(cls, op: Operation, error: ServiceError) -> ServiceResult:
        return cls(ok=False, op=op, error=error)
