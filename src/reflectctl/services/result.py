"""ServiceResult and ServiceError: the universal service contract.

INVARIANT: All service-layer methods return ServiceResult. Failures carry
an :class:`ErrorCode`, and each code maps to exactly one HTTP-style
status via :func:`http_status`.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Error taxonomy shared by every service."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_NAME = "INVALID_NAME"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    IO_ERROR = "IO_ERROR"


_HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.INVALID_NAME: 400,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.CONFLICT: 409,
    ErrorCode.IO_ERROR: 500,
}


def http_status(code: ErrorCode) -> int:
    """HTTP status a boundary layer should answer with for *code*."""
    return _HTTP_STATUS[code]


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @property
    def status(self) -> int:
        return http_status(self.code)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"list_reviews"``).
        data: Operation-specific payload on success (and on some failures,
            e.g. ``{"hasDraft": False}``).
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
