"""LifeMapService: the Life Map assessment table."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from reflectctl.domain.life_map import NEW_LIFE_MAP, LifeMapForm, parse_life_map, update_life_map
from reflectctl.infrastructure.filestore import DocumentNotFoundError, StoreError
from reflectctl.services.base import BaseService
from reflectctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class LifeMapService(BaseService):
    """Read and partially update the six domain scores."""

    def get_life_map(self) -> ServiceResult:
        op = "get_life_map"
        path = self._workspace.life_map_path()
        try:
            raw = self._store.read(path)
        except StoreError as exc:
            return self._store_failure(op, exc, not_found="Life map not found")

        life_map = parse_life_map(raw)
        return self._ok(
            op,
            {
                "domains": life_map.to_json(),
                "chartData": life_map.chart_data(),
                "total": life_map.total(),
                "filePath": path,
            },
        )

    def update_life_map(self, payload: dict[str, Any]) -> ServiceResult:
        """Merge *payload* into the stored scores and rewrite only the table rows.

        A missing document is started from a bare ``# Life Map`` heading.
        """
        op = "update_life_map"
        try:
            form = LifeMapForm.model_validate(payload)
        except ValidationError as exc:
            return self._validation_failure(op, exc)

        path = self._workspace.life_map_path()
        try:
            raw = self._store.read(path)
        except DocumentNotFoundError:
            logger.info("No life map at %s, starting a new one", path)
            raw = NEW_LIFE_MAP
        except StoreError as exc:
            return self._store_failure(op, exc)

        life_map = form.apply(parse_life_map(raw))
        try:
            self._store.write(path, update_life_map(raw, life_map))
        except StoreError as exc:
            return self._store_failure(op, exc)
        return self._ok(op, {"filePath": path, "domains": life_map.to_json()})
