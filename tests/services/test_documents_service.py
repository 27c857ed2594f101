"""Tests for DocumentService."""

from pathlib import Path

import pytest

from reflectctl.infrastructure.workspace import Workspace
from reflectctl.services.documents import DocumentService
from reflectctl.services.result import ErrorCode
from tests.conftest import write_doc

PRINCIPLES = "# Principles\n\n1. Default to action.\n"


class TestGetDocument:
    def test_existing(self, workspace: Workspace, data_root: Path) -> None:
        write_doc(data_root, "principles.md", PRINCIPLES)
        result = DocumentService(workspace).get_document("principles")
        assert result.ok
        assert result.data == {"name": "principles", "content": PRINCIPLES}

    def test_empty_document(self, workspace: Workspace, data_root: Path) -> None:
        write_doc(data_root, "memory.md", "")
        result = DocumentService(workspace).get_document("memory")
        assert result.ok
        assert result.data["content"] == ""

    def test_missing(self, workspace: Workspace) -> None:
        result = DocumentService(workspace).get_document("north-star")
        assert result.error is not None
        assert result.error.code is ErrorCode.NOT_FOUND
        assert result.error.message == "Document north-star not found"

    @pytest.mark.parametrize("name", ["north_star", "../memory", "life-map"])
    def test_not_allowlisted(self, workspace: Workspace, name: str) -> None:
        result = DocumentService(workspace).get_document(name)
        assert result.error is not None
        assert result.error.code is ErrorCode.INVALID_NAME
        assert result.error.detail["allowed"] == ["memory", "north-star", "principles"]


class TestSaveDocument:
    def test_save_and_read_back(self, workspace: Workspace, data_root: Path) -> None:
        svc = DocumentService(workspace)
        result = svc.save_document("north-star", "# North Star\n")
        assert result.ok
        assert result.data == {"name": "north-star", "content": "# North Star\n"}
        assert (data_root / "north_star.md").read_text() == "# North Star\n"
        assert svc.get_document("north-star").data["content"] == "# North Star\n"

    def test_save_empty(self, workspace: Workspace, data_root: Path) -> None:
        assert DocumentService(workspace).save_document("memory", "").ok
        assert (data_root / "memory.md").read_text() == ""

    def test_missing_content(self, workspace: Workspace) -> None:
        result = DocumentService(workspace).save_document("memory", None)
        assert result.error is not None
        assert result.error.message == "Missing content field"

    def test_non_string_content(self, workspace: Workspace) -> None:
        result = DocumentService(workspace).save_document("memory", ["a"])
        assert result.error is not None
        assert result.error.message == "Content must be a string"

    def test_invalid_name_not_written(self, workspace: Workspace, data_root: Path) -> None:
        result = DocumentService(workspace).save_document("../escape", "x")
        assert result.error is not None
        assert not (data_root.parent / "escape.md").exists()
