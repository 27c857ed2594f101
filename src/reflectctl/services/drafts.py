"""DraftService: auto-saved working copies of goals documents.

A draft lives beside its document in the drafts directory
(``goals/.drafts/1_year.md`` for ``1-year``). Saving and clearing are
idempotent: re-saving identical content and clearing an absent draft
both succeed. A successful save of the real document clears its draft.
"""

from __future__ import annotations

from typing import Any

from reflectctl.domain.names import InvalidDocumentName, resolve_timeframe
from reflectctl.infrastructure.filestore import StoreError
from reflectctl.services.base import BaseService
from reflectctl.services.result import ErrorCode, ServiceResult


class DraftService(BaseService):
    """Presence, restore, and clearing of goal drafts."""

    def get_draft(self, timeframe: str) -> ServiceResult:
        """``{content, hasDraft: True}``, or NOT_FOUND with ``hasDraft: False``."""
        op = "get_draft"
        try:
            tf = resolve_timeframe(timeframe)
        except InvalidDocumentName as exc:
            return self._name_failure(op, exc)

        try:
            content = self._store.read(self._workspace.draft_path(tf))
        except StoreError as exc:
            return self._store_failure(
                op, exc, not_found="No draft found", data={"hasDraft": False}
            )
        return self._ok(op, {"content": content, "hasDraft": True})

    def save_draft(self, timeframe: str, content: Any) -> ServiceResult:
        """Write *content* (possibly empty) as the draft."""
        op = "save_draft"
        try:
            tf = resolve_timeframe(timeframe)
        except InvalidDocumentName as exc:
            return self._name_failure(op, exc)

        if content is None:
            return self._fail(
                op, ErrorCode.VALIDATION_ERROR, "Missing required field: content", field="content"
            )
        if not isinstance(content, str):
            return self._fail(
                op, ErrorCode.VALIDATION_ERROR, "Invalid content type", field="content"
            )

        path = self._workspace.draft_path(tf)
        try:
            self._store.write(path, content)
        except StoreError as exc:
            return self._store_failure(op, exc)
        return self._ok(op, {"filePath": path, "hasDraft": True})

    def clear_draft(self, timeframe: str) -> ServiceResult:
        """Remove the draft; succeeds whether or not one exists."""
        op = "clear_draft"
        try:
            tf = resolve_timeframe(timeframe)
        except InvalidDocumentName as exc:
            return self._name_failure(op, exc)

        try:
            self._store.remove(self._workspace.draft_path(tf))
        except StoreError as exc:
            return self._store_failure(op, exc)
        return self._ok(op, {"hasDraft": False})
