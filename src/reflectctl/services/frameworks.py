"""FrameworkService: allowlisted framework documents."""

from __future__ import annotations

from typing import Any

from reflectctl.domain.frameworks import parse_framework
from reflectctl.domain.names import InvalidDocumentName, resolve_framework
from reflectctl.infrastructure.filestore import StoreError
from reflectctl.services.base import BaseService
from reflectctl.services.result import ErrorCode, ServiceResult


class FrameworkService(BaseService):
    """Read and replace framework documents by allowlisted name."""

    def get_framework(self, name: str) -> ServiceResult:
        op = "get_framework"
        try:
            framework = resolve_framework(name)
        except InvalidDocumentName as exc:
            return self._name_failure(op, exc)

        try:
            raw = self._store.read(self._workspace.framework_path(framework))
        except StoreError as exc:
            return self._store_failure(op, exc, not_found=f"Framework {name} not found")
        return self._ok(op, {"name": framework.value, **parse_framework(raw)})

    def save_framework(self, name: str, content: Any) -> ServiceResult:
        op = "save_framework"
        try:
            framework = resolve_framework(name)
        except InvalidDocumentName as exc:
            return self._name_failure(op, exc)

        if not isinstance(content, str):
            message = "Missing content field" if content is None else "Content must be a string"
            return self._fail(op, ErrorCode.VALIDATION_ERROR, message, field="content")

        try:
            self._store.write(self._workspace.framework_path(framework), content)
        except StoreError as exc:
            return self._store_failure(op, exc)
        return self._ok(op, {"name": framework.value, "content": content})
