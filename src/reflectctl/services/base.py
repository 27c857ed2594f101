"""BaseService: shared foundation for all reflectctl services.

Every service receives a :class:`Workspace` at construction time and
converts the typed failures raised below it (store errors, allowlist
rejections, form validation errors) into failed ``ServiceResult`` values.
Services never raise for expected failures.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from reflectctl.infrastructure.filestore import DocumentNotFoundError, FileStore, StoreError
from reflectctl.services.result import ErrorCode, ServiceError, ServiceResult

if TYPE_CHECKING:
    from reflectctl.domain.names import InvalidDocumentName
    from reflectctl.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class GoalsService(BaseService):
            def snapshot(self) -> ServiceResult:
                try:
                    raw = self._store.read(path)
                except StoreError as exc:
                    return self._store_failure("goals_snapshot", exc)
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    @property
    def _store(self) -> FileStore:
        return self._workspace.store

    @staticmethod
    def _ok(op: str, data: dict[str, Any], warnings: list[str] | None = None) -> ServiceResult:
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings or [])

    @staticmethod
    def _fail(
        op: str,
        code: ErrorCode,
        message: str,
        *,
        data: dict[str, Any] | None = None,
        **detail: Any,
    ) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            data=data or {},
            error=ServiceError(code=code, message=message, detail=detail),
        )

    def _store_failure(
        self,
        op: str,
        exc: StoreError,
        *,
        not_found: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Map a store exception onto NOT_FOUND or IO_ERROR."""
        if isinstance(exc, DocumentNotFoundError):
            return self._fail(
                op, ErrorCode.NOT_FOUND, not_found or str(exc), data=data, path=exc.path
            )
        logger.warning("%s failed: %s", op, exc)
        return self._fail(op, ErrorCode.IO_ERROR, str(exc), data=data, path=exc.path)

    def _name_failure(self, op: str, exc: InvalidDocumentName) -> ServiceResult:
        return self._fail(
            op, ErrorCode.INVALID_NAME, str(exc), name=exc.name, allowed=exc.allowed
        )

    def _validation_failure(self, op: str, exc: ValidationError) -> ServiceResult:
        """Report the first invalid field by name."""
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "body"
        message = f"Missing or invalid {field} field: {first['msg']}"
        return self._fail(
            op,
            ErrorCode.VALIDATION_ERROR,
            message,
            field=field,
            errors=len(exc.errors()),
        )
