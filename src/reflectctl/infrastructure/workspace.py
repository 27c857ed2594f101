"""Workspace: the single dependency injected into every service.

Owns the file store and maps document identities (review dates, goal
timeframes, framework and document names) to store-relative paths using
the configured ``[paths]`` layout.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from reflectctl.domain.aggregate import is_review_entry
from reflectctl.domain.life_map import LIFE_MAP_FILENAME
from reflectctl.domain.types import ReviewType
from reflectctl.infrastructure.filestore import FileStore, StoreError

if TYPE_CHECKING:
    from pathlib import Path

    from reflectctl.config.settings import ReflectSettings
    from reflectctl.domain.types import DocumentName, FrameworkName, Timeframe

logger = logging.getLogger(__name__)


class Workspace:
    """A data root plus the layout of its document families."""

    def __init__(self, settings: ReflectSettings) -> None:
        self.settings = settings
        self.root: Path = settings.data_root
        self.store = FileStore(self.root)

    # -- layout --------------------------------------------------------

    def review_dir(self, review_type: ReviewType) -> str:
        paths = self.settings.paths
        return paths.daily if review_type is ReviewType.DAILY else paths.weekly

    def review_path(self, review_type: ReviewType, date: str) -> str:
        return f"{self.review_dir(review_type)}/{date}.md"

    def goals_path(self, timeframe: Timeframe) -> str:
        return f"{self.settings.paths.goals}/{timeframe.filename}"

    def draft_path(self, timeframe: Timeframe) -> str:
        return f"{self.settings.paths.drafts}/{timeframe.filename}"

    def framework_path(self, name: FrameworkName) -> str:
        return f"{self.settings.paths.frameworks}/{name.filename}"

    def life_map_path(self) -> str:
        return f"{self.settings.paths.frameworks}/{LIFE_MAP_FILENAME}"

    def document_path(self, name: DocumentName) -> str:
        directory = self.settings.paths.documents.strip("/")
        return f"{directory}/{name.filename}" if directory else name.filename

    # -- bulk reads ----------------------------------------------------

    def read_reviews(self, review_type: ReviewType) -> list[tuple[str, str]]:
        """``(path, text)`` for every review entry in a family's directory.

        Missing directories yield ``[]``. Unreadable files and links that
        leave the data root are skipped.
        """
        directory = self.review_dir(review_type)
        documents: list[tuple[str, str]] = []
        for name in self.store.list(directory):
            if not is_review_entry(name):
                continue
            path = f"{directory}/{name}"
            try:
                documents.append((path, self.store.read(path)))
            except StoreError as exc:
                logger.warning("Skipping unreadable review %s: %s", path, exc)
        return documents
