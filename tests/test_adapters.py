"""Tests for the filesystem adapters."""

from __future__ import annotations

from pathlib import Path

import pytest

from precheck.adapters import InMemoryFileSystem, LocalFileSystem
from precheck.ports import IFileSystem


@pytest.mark.parametrize("cls", [LocalFileSystem, InMemoryFileSystem])
def test_adapters_satisfy_the_port(cls):
    assert isinstance(cls(), IFileSystem)


# -- LocalFileSystem ----------------------------------------------------------


class TestLocalFileSystem:
    def test_queries(self, tmp_path: Path):
        fs = LocalFileSystem()
        target = tmp_path / "a.txt"
        target.write_bytes(b"abc")

        assert fs.exists(str(target))
        assert fs.is_file(str(target))
        assert not fs.is_dir(str(target))
        assert fs.is_dir(str(tmp_path))
        assert fs.is_readable(str(target))
        assert fs.size(str(target)) == 3
        assert not fs.exists(str(tmp_path / "missing"))

    def test_scan_lists_entries(self, tmp_path: Path):
        (tmp_path / "one").write_text("1")
        (tmp_path / "two").mkdir()
        with LocalFileSystem().scan(str(tmp_path)) as entries:
            assert sorted(entries) == ["one", "two"]

    def test_scan_missing_directory_raises(self, tmp_path: Path):
        with pytest.raises(OSError), LocalFileSystem().scan(str(tmp_path / "nope")):
            pass

    def test_make_dirs(self, tmp_path: Path):
        fs = LocalFileSystem()
        target = tmp_path / "x" / "y"
        fs.make_dirs(str(target), 0o755)
        fs.make_dirs(str(target), 0o755)
        assert target.is_dir()


# -- InMemoryFileSystem -------------------------------------------------------


class TestInMemoryFileSystem:
    def test_root_exists(self, memory_fs: InMemoryFileSystem):
        assert memory_fs.is_dir("/")

    def test_add_file_creates_parents(self, memory_fs: InMemoryFileSystem):
        memory_fs.add_file("/a/b/c.txt", b"hello")
        assert memory_fs.is_dir("/a")
        assert memory_fs.is_dir("/a/b")
        assert memory_fs.is_file("/a/b/c.txt")
        assert memory_fs.size("/a/b/c.txt") == 5

    def test_paths_are_normalised(self, memory_fs: InMemoryFileSystem):
        memory_fs.add_dir("/a/b/")
        assert memory_fs.is_dir("/a//b")
        assert memory_fs.is_dir("a/b")

    def test_scan_lists_direct_children(self, memory_fs: InMemoryFileSystem):
        memory_fs.add_file("/a/one.txt")
        memory_fs.add_file("/a/sub/two.txt")
        with memory_fs.scan("/a") as entries:
            assert list(entries) == ["one.txt", "sub"]
        assert memory_fs.open_scans == 0

    def test_scan_errors(self, memory_fs: InMemoryFileSystem):
        memory_fs.add_file("/file.txt")
        memory_fs.add_dir("/locked", readable=False)

        with pytest.raises(FileNotFoundError), memory_fs.scan("/missing"):
            pass
        with pytest.raises(NotADirectoryError), memory_fs.scan("/file.txt"):
            pass
        with pytest.raises(PermissionError), memory_fs.scan("/locked"):
            pass
        assert memory_fs.open_scans == 0

    def test_size_of_missing_path(self, memory_fs: InMemoryFileSystem):
        with pytest.raises(FileNotFoundError):
            memory_fs.size("/missing")

    def test_make_dirs_records_mode(self, memory_fs: InMemoryFileSystem):
        memory_fs.make_dirs("/x/y", 0o700)
        assert memory_fs.node("/x").mode == 0o700
        assert memory_fs.node("/x/y").mode == 0o700

    def test_make_dirs_existing_is_not_an_error(self, memory_fs: InMemoryFileSystem):
        memory_fs.add_dir("/x")
        memory_fs.make_dirs("/x", 0o755)
        assert memory_fs.node("/x").mode is None

    def test_make_dirs_injected_failure(self, memory_fs: InMemoryFileSystem):
        memory_fs.fail_create("/x/y")
        with pytest.raises(PermissionError):
            memory_fs.make_dirs("/x/y/z", 0o755)
        assert memory_fs.is_dir("/x")
        assert not memory_fs.exists("/x/y")
