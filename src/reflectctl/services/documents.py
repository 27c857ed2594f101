"""DocumentService: the memory, north-star and principles documents."""

from __future__ import annotations

from typing import Any

from reflectctl.domain.names import InvalidDocumentName, resolve_document
from reflectctl.infrastructure.filestore import StoreError
from reflectctl.services.base import BaseService
from reflectctl.services.result import ErrorCode, ServiceResult


class DocumentService(BaseService):
    """Read and replace single free-form documents by allowlisted name."""

    def get_document(self, name: str) -> ServiceResult:
        op = "get_document"
        try:
            document = resolve_document(name)
        except InvalidDocumentName as exc:
            return self._name_failure(op, exc)

        try:
            content = self._store.read(self._workspace.document_path(document))
        except StoreError as exc:
            return self._store_failure(op, exc, not_found=f"Document {name} not found")
        return self._ok(op, {"name": document.value, "content": content})

    def save_document(self, name: str, content: Any) -> ServiceResult:
        op = "save_document"
        try:
            document = resolve_document(name)
        except InvalidDocumentName as exc:
            return self._name_failure(op, exc)

        if not isinstance(content, str):
            message = "Missing content field" if content is None else "Content must be a string"
            return self._fail(op, ErrorCode.VALIDATION_ERROR, message, field="content")

        try:
            self._store.write(self._workspace.document_path(document), content)
        except StoreError as exc:
            return self._store_failure(op, exc)
        return self._ok(op, {"name": document.value, "content": content})
