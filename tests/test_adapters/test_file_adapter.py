"""Tests for the filesystem adapter."""

import pytest

from lmsbuild.adapters.file_adapter import FileSystemAdapter, create_file_adapter
from lmsbuild.core.errors import FileSystemError


@pytest.fixture
def adapter() -> FileSystemAdapter:
    return create_file_adapter()


def test_write_and_read_creates_parents(adapter, tmp_path):
    """Test writing into a missing directory."""
    path = tmp_path / "a" / "b" / "file.txt"
    adapter.write_text(path, "hello")
    assert adapter.read_text(path) == "hello"
    assert adapter.is_file(path)
    assert adapter.is_dir(path.parent)


def test_read_missing_file(adapter, tmp_path):
    """Test reading a missing file raises FileSystemError with context."""
    with pytest.raises(FileSystemError) as exc_info:
        adapter.read_text(tmp_path / "missing.txt")
    assert exc_info.value.context["operation"] == "read_text"


def test_find_files_recursive(adapter, tmp_path):
    """Test pattern matching is recursive and sorted."""
    (tmp_path / "include" / "detail").mkdir(parents=True)
    (tmp_path / "include" / "b.h").write_text("")
    (tmp_path / "include" / "a.h").write_text("")
    (tmp_path / "include" / "detail" / "c.h").write_text("")
    (tmp_path / "include" / "notes.txt").write_text("")

    found = adapter.find_files(tmp_path / "include", "*.h")

    assert [p.relative_to(tmp_path / "include").as_posix() for p in found] == [
        "a.h",
        "b.h",
        "detail/c.h",
    ]


def test_find_files_requires_directory(adapter, tmp_path):
    """Test searching a missing directory."""
    with pytest.raises(FileSystemError):
        adapter.find_files(tmp_path / "nope", "*.h")


def test_remove(adapter, tmp_path):
    """Test file and directory removal tolerate missing paths."""
    (tmp_path / "d").mkdir()
    (tmp_path / "d" / "f").write_text("x")
    adapter.remove_file(tmp_path / "d" / "f")
    adapter.remove_file(tmp_path / "d" / "f")
    adapter.remove_dir(tmp_path / "d")
    adapter.remove_dir(tmp_path / "d")
    assert not adapter.exists(tmp_path / "d")
