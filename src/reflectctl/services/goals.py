"""GoalsService: goal snapshots, goal documents, and saving them."""

from __future__ import annotations

import logging
from typing import Any

from reflectctl.domain.frontmatter import load_metadata
from reflectctl.domain.goals import goal_snapshot, parse_goals
from reflectctl.domain.names import InvalidDocumentName, resolve_timeframe
from reflectctl.infrastructure.filestore import StoreError
from reflectctl.services.base import BaseService
from reflectctl.services.result import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)


class GoalsService(BaseService):
    """Reads and writes the per-timeframe goals documents."""

    def snapshot(self) -> ServiceResult:
        """The first goals of the snapshot timeframe as ``{goals: [...]}``.

        An empty document yields ``{goals: []}``; a missing one is NOT_FOUND.
        """
        op = "goals_snapshot"
        cfg = self._workspace.settings.goals
        path = self._workspace.goals_path(cfg.snapshot_timeframe)
        try:
            raw = self._store.read(path)
        except StoreError as exc:
            return self._store_failure(op, exc, not_found="Goals file not found")

        if not raw.strip():
            return self._ok(op, {"goals": []})

        document = parse_goals(raw, path, description_limit=cfg.description_limit)
        return self._ok(op, {"goals": goal_snapshot(document, cfg.snapshot_limit)})

    def get_goals(self, timeframe: str) -> ServiceResult:
        """``{content, metadata, status, goals}`` for one timeframe."""
        op = "get_goals"
        try:
            tf = resolve_timeframe(timeframe)
        except InvalidDocumentName as exc:
            return self._name_failure(op, exc)

        path = self._workspace.goals_path(tf)
        try:
            raw = self._store.read(path)
        except StoreError as exc:
            return self._store_failure(
                op, exc, not_found=f"Goal file for {timeframe} not found"
            )

        limit = self._workspace.settings.goals.description_limit
        document = parse_goals(raw, path, description_limit=limit)
        return self._ok(
            op,
            {
                "content": raw,
                "metadata": load_metadata(raw),
                "status": document.status.value,
                "goals": [goal.to_json() for goal in document.goals],
            },
        )

    def save_goals(self, timeframe: str, content: Any) -> ServiceResult:
        """Replace the goals document, then clear its draft."""
        op = "save_goals"
        try:
            tf = resolve_timeframe(timeframe)
        except InvalidDocumentName as exc:
            return self._name_failure(op, exc)

        if content is None:
            return self._fail(
                op, ErrorCode.VALIDATION_ERROR, "Missing required field: content", field="content"
            )
        if not isinstance(content, str) or not content.strip():
            return self._fail(
                op, ErrorCode.VALIDATION_ERROR, "Invalid or empty content", field="content"
            )

        path = self._workspace.goals_path(tf)
        try:
            self._store.write(path, content)
        except StoreError as exc:
            return self._store_failure(op, exc)

        warnings: list[str] = []
        try:
            self._store.remove(self._workspace.draft_path(tf))
        except StoreError as exc:
            logger.warning("Draft for %s not cleared: %s", timeframe, exc)
            warnings.append(f"Draft for {timeframe} could not be cleared")
        return self._ok(op, {"filePath": path}, warnings)
