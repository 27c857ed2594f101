"""File store for markdown documents under the data root.

INVARIANT: Files are truth. Every document is read and written whole;
there is no index, cache, or lock. Concurrent writers race and the last
write wins.

Failures are typed so callers switch on the exception class rather than
inspecting messages:

- :class:`DocumentNotFoundError` when the target does not exist.
- :class:`StoreIOError` for any other OS-level failure, including a
  symlink that leads outside the data root.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from reflectctl.domain.names import InvalidDocumentName

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base class for file store failures."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(message)


class DocumentNotFoundError(StoreError):
    """The requested document does not exist."""


class StoreIOError(StoreError):
    """Reading or writing failed for a reason other than absence."""


class FileStore:
    """Read/write/list/remove named text blobs relative to *root*.

    Paths are root-relative POSIX strings (``reviews/daily/2025-01-01.md``).
    Absolute paths and ``..`` segments are rejected outright; symlinks are
    followed only while they stay inside *root*.
    """

    def __init__(self, root: Path) -> None:
        self.root = root

    def resolve(self, relative: str) -> Path:
        """Resolve *relative* inside the root.

        Raises:
            InvalidDocumentName: If the path is absolute or climbs out with ``..``.
            StoreIOError: If a symlink along the path leads outside the root.
        """
        parts = PurePosixPath(relative)
        if parts.is_absolute() or ".." in parts.parts:
            raise InvalidDocumentName("path", relative, [])

        path = self.root / relative
        if not path.resolve().is_relative_to(self.root.resolve()):
            logger.warning("Refusing %s: it links outside %s", relative, self.root)
            raise StoreIOError(relative, f"{relative} links outside the data root")
        return path

    def exists(self, relative: str) -> bool:
        """True for a regular file inside the root; escaping links count as absent."""
        try:
            return self.resolve(relative).is_file()
        except StoreIOError:
            return False

    def read(self, relative: str) -> str:
        """Return the document text.

        Raises:
            DocumentNotFoundError: If the document does not exist.
            StoreIOError: On any other OS failure.
        """
        path = self.resolve(relative)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise DocumentNotFoundError(relative, f"{relative} not found") from exc
        except IsADirectoryError as exc:
            raise StoreIOError(relative, f"{relative} is a directory") from exc
        except OSError as exc:
            logger.warning("Failed to read %s: %s", path, exc)
            raise StoreIOError(relative, f"Failed to read {relative}") from exc

    def write(self, relative: str, text: str) -> None:
        """Replace the document with *text*, creating parent directories.

        Raises:
            StoreIOError: If the directory or file cannot be written.
        """
        path = self.resolve(relative)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            logger.warning("Failed to write %s: %s", path, exc)
            raise StoreIOError(relative, f"Failed to write {relative}") from exc
        logger.debug("Wrote %s (%d chars)", path, len(text))

    def list(self, relative: str) -> list[str]:
        """Sorted file names in a directory; ``[]`` if it cannot be listed."""
        try:
            path = self.resolve(relative)
            return sorted(p.name for p in path.iterdir() if p.is_file())
        except (OSError, StoreIOError):
            logger.debug("Directory %s not listable, treating as empty", relative)
            return []

    def remove(self, relative: str) -> None:
        """Delete the document; succeeds if it is already absent.

        Raises:
            StoreIOError: If the file exists but cannot be removed.
        """
        path = self.resolve(relative)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("Failed to remove %s: %s", path, exc)
            raise StoreIOError(relative, f"Failed to remove {relative}") from exc
