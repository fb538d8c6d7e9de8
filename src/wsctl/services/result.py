"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: every public service method returns a ServiceResult; domain
exceptions are translated here and never escape to the command layer.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from wsctl.domain.errors import WsctlError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"open"``, ``"search"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues such as skipped directories.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing spans in verbose mode).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
            warnings=warnings or [],
        )

    @classmethod
    def from_error(
        cls, op: str, exc: WsctlError, *, warnings: list[str] | None = None
    ) -> ServiceResult:
        """Translate a domain exception into a failed result."""
        return cls.failure(op, exc.code, exc.message, detail=exc.detail, warnings=warnings)
