"""Tests for the markdown file store."""

from pathlib import Path

import pytest

from reflectctl.domain.names import InvalidDocumentName
from reflectctl.infrastructure.filestore import (
    DocumentNotFoundError,
    FileStore,
    StoreError,
    StoreIOError,
)


class TestRead:
    def test_read_existing(self, tmp_path: Path) -> None:
        (tmp_path / "a.md").write_text("hello", encoding="utf-8")
        assert FileStore(tmp_path).read("a.md") == "hello"

    def test_missing_raises_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentNotFoundError) as exc_info:
            FileStore(tmp_path).read("missing.md")
        assert exc_info.value.path == "missing.md"

    def test_directory_raises_io_error(self, tmp_path: Path) -> None:
        (tmp_path / "dir.md").mkdir()
        with pytest.raises(StoreIOError):
            FileStore(tmp_path).read("dir.md")

    def test_errors_share_base(self) -> None:
        assert issubclass(DocumentNotFoundError, StoreError)
        assert issubclass(StoreIOError, StoreError)


class TestWrite:
    def test_creates_parents(self, tmp_path: Path) -> None:
        store = FileStore(tmp_path)
        store.write("reviews/daily/2026-01-05.md", "body")
        assert (tmp_path / "reviews" / "daily" / "2026-01-05.md").read_text() == "body"

    def test_replaces_whole_document(self, tmp_path: Path) -> None:
        store = FileStore(tmp_path)
        store.write("a.md", "first version, long")
        store.write("a.md", "second")
        assert store.read("a.md") == "second"

    def test_exists(self, tmp_path: Path) -> None:
        store = FileStore(tmp_path)
        assert store.exists("a.md") is False
        store.write("a.md", "x")
        assert store.exists("a.md") is True


class TestList:
    def test_sorted_files_only(self, tmp_path: Path) -> None:
        store = FileStore(tmp_path)
        store.write("d/b.md", "")
        store.write("d/a.md", "")
        (tmp_path / "d" / "sub").mkdir()
        assert store.list("d") == ["a.md", "b.md"]

    def test_missing_directory_is_empty(self, tmp_path: Path) -> None:
        assert FileStore(tmp_path).list("nope") == []


class TestRemove:
    def test_remove_existing(self, tmp_path: Path) -> None:
        store = FileStore(tmp_path)
        store.write("a.md", "x")
        store.remove("a.md")
        assert store.exists("a.md") is False

    def test_remove_missing_is_noop(self, tmp_path: Path) -> None:
        FileStore(tmp_path).remove("never-existed.md")


class TestResolve:
    def test_escape_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidDocumentName):
            FileStore(tmp_path / "root").resolve("../outside.md")

    def test_inside_root(self, tmp_path: Path) -> None:
        assert FileStore(tmp_path).resolve("goals/1_year.md") == tmp_path / "goals" / "1_year.md"

    @pytest.mark.parametrize("relative", ["/etc/passwd", "goals/../../x.md"])
    def test_lexical_escape_is_invalid_name(self, tmp_path: Path, relative: str) -> None:
        with pytest.raises(InvalidDocumentName):
            FileStore(tmp_path).resolve(relative)


class TestSymlinks:
    @pytest.fixture()
    def root(self, tmp_path: Path) -> Path:
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "secret.md").write_text("secret")
        root = tmp_path / "root"
        (root / "reviews").mkdir(parents=True)
        (root / "reviews" / "leak.md").symlink_to(outside / "secret.md")
        (root / "reviews" / "elsewhere").symlink_to(outside, target_is_directory=True)
        (root / "inside.md").write_text("ok")
        (root / "reviews" / "alias.md").symlink_to(root / "inside.md")
        return root

    def test_read_escaping_link_is_io_error(self, root: Path) -> None:
        with pytest.raises(StoreIOError):
            FileStore(root).read("reviews/leak.md")

    def test_write_through_escaping_link_refused(self, root: Path) -> None:
        with pytest.raises(StoreIOError):
            FileStore(root).write("reviews/leak.md", "overwritten")
        assert (root.parent / "outside" / "secret.md").read_text() == "secret"

    def test_escaping_link_not_reported_as_existing(self, root: Path) -> None:
        assert FileStore(root).exists("reviews/leak.md") is False

    def test_escaping_directory_lists_empty(self, root: Path) -> None:
        assert FileStore(root).list("reviews/elsewhere") == []

    def test_link_inside_root_is_followed(self, root: Path) -> None:
        assert FileStore(root).read("reviews/alias.md") == "ok"
