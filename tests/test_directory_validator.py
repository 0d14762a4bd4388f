"""Tests for DirectoryValidator."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from precheck import DirectoryError, DirectoryValidator, ErrorCode, ValidatorConfig
from precheck.adapters import InMemoryFileSystem


def _memory(path: str, fs: InMemoryFileSystem, **options) -> DirectoryValidator:
    return DirectoryValidator.of("out", path, filesystem=fs, **options)


# -- Existence ----------------------------------------------------------------


@pytest.mark.parametrize("value", [None, "", "   "])
def test_blank_values_are_rejected(value):
    with pytest.raises(DirectoryError) as exc_info:
        DirectoryValidator.of("out", value).must_exist()
    assert exc_info.value.code is ErrorCode.EMPTY_VALUE


def test_must_exist(tmp_path: Path):
    subject = DirectoryValidator.of("out", tmp_path)
    assert subject.must_exist() is subject

    with pytest.raises(DirectoryError) as exc_info:
        DirectoryValidator.of("out", tmp_path / "missing").must_exist()
    assert exc_info.value.code is ErrorCode.NOT_EXIST


def test_must_exist_rejects_files(tmp_path: Path):
    target = tmp_path / "file.txt"
    target.write_text("x")
    with pytest.raises(DirectoryError) as exc_info:
        DirectoryValidator.of("out", target).must_exist()
    assert exc_info.value.code is ErrorCode.NOT_EXIST


def test_must_not_exist(tmp_path: Path):
    DirectoryValidator.of("out", tmp_path / "missing").must_not_exist()

    with pytest.raises(DirectoryError) as exc_info:
        DirectoryValidator.of("out", tmp_path).must_not_exist()
    assert exc_info.value.code is ErrorCode.ALREADY_EXISTS


# -- Permissions --------------------------------------------------------------


def test_permissions_on_local_directory(tmp_path: Path):
    DirectoryValidator.of("out", tmp_path).must_be_readable().must_be_writable()


def test_not_readable(memory_fs: InMemoryFileSystem):
    memory_fs.add_dir("/private", readable=False)
    with pytest.raises(DirectoryError) as exc_info:
        _memory("/private", memory_fs).must_be_readable()
    assert exc_info.value.code is ErrorCode.NOT_READABLE


def test_not_writable(memory_fs: InMemoryFileSystem):
    memory_fs.add_dir("/readonly", writable=False)
    with pytest.raises(DirectoryError) as exc_info:
        _memory("/readonly", memory_fs).must_be_writable()
    assert exc_info.value.code is ErrorCode.NOT_WRITABLE


@pytest.mark.parametrize("check", ["must_be_readable", "must_be_writable"])
def test_permission_checks_require_existence(check, memory_fs: InMemoryFileSystem):
    with pytest.raises(DirectoryError) as exc_info:
        getattr(_memory("/missing", memory_fs), check)()
    assert exc_info.value.code is ErrorCode.NOT_EXIST


# -- Emptiness ----------------------------------------------------------------


def test_empty_directory(tmp_path: Path):
    subject = DirectoryValidator.of("out", tmp_path)
    assert subject.is_not_empty() is False
    assert subject.must_be_empty() is subject


def test_non_empty_directory(tmp_path: Path):
    (tmp_path / "entry.txt").write_text("x")
    subject = DirectoryValidator.of("out", tmp_path)
    assert subject.is_not_empty() is True

    with pytest.raises(DirectoryError) as exc_info:
        subject.must_be_empty()
    assert exc_info.value.code is ErrorCode.NOT_EMPTY


@pytest.mark.parametrize("entry", [None, "file.txt", "subdir"])
def test_is_not_empty_and_must_be_empty_agree(tmp_path: Path, entry):
    if entry == "file.txt":
        (tmp_path / entry).write_text("x")
    elif entry == "subdir":
        (tmp_path / entry).mkdir()
    subject = DirectoryValidator.of("out", tmp_path)

    try:
        subject.must_be_empty()
        empty = True
    except DirectoryError:
        empty = False
    assert subject.is_not_empty() is not empty


def test_emptiness_checks_require_existence(tmp_path: Path):
    with pytest.raises(DirectoryError) as exc_info:
        DirectoryValidator.of("out", tmp_path / "missing").is_not_empty()
    assert exc_info.value.code is ErrorCode.NOT_EXIST


def test_cannot_scan(memory_fs: InMemoryFileSystem):
    memory_fs.add_dir("/box")
    memory_fs.fail_scan("/box")
    subject = _memory("/box", memory_fs)

    with pytest.raises(DirectoryError) as exc_info:
        subject.is_not_empty()
    assert exc_info.value.code is ErrorCode.CANNOT_SCAN
    assert isinstance(exc_info.value.__cause__, PermissionError)

    with pytest.raises(DirectoryError) as exc_info:
        subject.must_be_empty()
    assert exc_info.value.code is ErrorCode.CANNOT_SCAN
    assert memory_fs.open_scans == 0


def test_listing_is_released_on_every_exit(memory_fs: InMemoryFileSystem):
    memory_fs.add_file("/box/a.txt")
    memory_fs.add_file("/box/b.txt")
    memory_fs.add_dir("/empty")

    assert _memory("/box", memory_fs).is_not_empty() is True
    assert memory_fs.open_scans == 0

    with pytest.raises(DirectoryError):
        _memory("/box", memory_fs).must_be_empty()
    assert memory_fs.open_scans == 0

    _memory("/empty", memory_fs).must_be_empty()
    assert memory_fs.open_scans == 0


# -- ensure_exists ------------------------------------------------------------


def test_ensure_exists_creates_parent_and_target(tmp_path: Path):
    target = tmp_path / "parent" / "newdir"
    subject = DirectoryValidator.of("out", target)

    assert subject.ensure_exists() is subject
    assert target.is_dir()


def test_ensure_exists_is_idempotent(tmp_path: Path):
    target = tmp_path / "newdir"
    DirectoryValidator.of("out", target).ensure_exists()
    DirectoryValidator.of("out", target).ensure_exists()

    assert [p.name for p in tmp_path.iterdir()] == ["newdir"]


def test_ensure_exists_on_existing_directory_is_a_noop(
    memory_fs: InMemoryFileSystem,
):
    node = memory_fs.add_dir("/existing")
    _memory("/existing", memory_fs).ensure_exists()
    assert memory_fs.node("/existing") is node
    assert node.mode is None


def test_ensure_exists_uses_configured_mode(memory_fs: InMemoryFileSystem):
    _memory("/a/b", memory_fs).ensure_exists()
    assert memory_fs.node("/a").mode == 0o755
    assert memory_fs.node("/a/b").mode == 0o755

    config = ValidatorConfig(directory_mode=0o700)
    _memory("/c/d", memory_fs, config=config).ensure_exists()
    assert memory_fs.node("/c/d").mode == 0o700


def test_ensure_exists_reports_parent_failure(memory_fs: InMemoryFileSystem):
    memory_fs.fail_create("/a")
    with pytest.raises(DirectoryError) as exc_info:
        _memory("/a/b", memory_fs).ensure_exists()
    err = exc_info.value
    assert err.code is ErrorCode.CANNOT_CREATE
    assert err.context["path"] == "/a"
    assert isinstance(err.__cause__, PermissionError)
    assert not memory_fs.exists("/a/b")


def test_ensure_exists_reports_target_failure(memory_fs: InMemoryFileSystem):
    memory_fs.add_dir("/a")
    memory_fs.fail_create("/a/b")
    with pytest.raises(DirectoryError) as exc_info:
        _memory("/a/b", memory_fs).ensure_exists()
    assert exc_info.value.context["path"] == "/a/b"


def test_ensure_exists_over_a_file(memory_fs: InMemoryFileSystem):
    memory_fs.add_file("/a/file")
    with pytest.raises(DirectoryError) as exc_info:
        _memory("/a/file", memory_fs).ensure_exists()
    assert exc_info.value.code is ErrorCode.CANNOT_CREATE
    assert isinstance(exc_info.value.__cause__, FileExistsError)


def test_ensure_exists_requires_a_value():
    with pytest.raises(DirectoryError) as exc_info:
        DirectoryValidator.of("out", "").ensure_exists()
    assert exc_info.value.code is ErrorCode.EMPTY_VALUE


def test_ensure_exists_logs_creation(
    memory_fs: InMemoryFileSystem, caplog: pytest.LogCaptureFixture
):
    caplog.set_level(logging.INFO, logger="precheck")
    _memory("/logs", memory_fs).ensure_exists()
    assert any(
        "Created directory" in rec.message and rec.levelname == "INFO"
        for rec in caplog.records
    )


# -- ensure_deletable ---------------------------------------------------------


def test_ensure_deletable(tmp_path: Path):
    subject = DirectoryValidator.of("out", tmp_path)
    assert subject.ensure_deletable() is subject

    (tmp_path / "entry.txt").write_text("x")
    with pytest.raises(DirectoryError) as exc_info:
        subject.ensure_deletable()
    assert exc_info.value.code is ErrorCode.NOT_EMPTY

    subject.ensure_deletable(recursive=True)
    assert tmp_path.is_dir()
    assert (tmp_path / "entry.txt").exists()


def test_ensure_deletable_requires_existence(tmp_path: Path):
    with pytest.raises(DirectoryError) as exc_info:
        DirectoryValidator.of("out", tmp_path / "missing").ensure_deletable(True)
    assert exc_info.value.code is ErrorCode.NOT_EXIST


def test_violations_are_logged_at_debug(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.DEBUG, logger="precheck")
    with pytest.raises(DirectoryError):
        DirectoryValidator.of("out", None).must_exist()
    assert any("EMPTY_VALUE" in rec.message for rec in caplog.records)
