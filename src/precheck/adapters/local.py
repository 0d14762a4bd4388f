"""LocalFileSystem: ``IFileSystem`` backed by the host operating system."""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import TYPE_CHECKING

from ..ports.filesystem import IFileSystem

if TYPE_CHECKING:
    from collections.abc import Iterator


class LocalFileSystem(IFileSystem):
    """Answers filesystem queries with ``os`` calls against live state."""

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def is_readable(self, path: str) -> bool:
        return os.access(path, os.R_OK)

    def is_writable(self, path: str) -> bool:
        return os.access(path, os.W_OK)

    def size(self, path: str) -> int:
        return os.path.getsize(path)

    @contextmanager
    def scan(self, path: str) -> Iterator[Iterator[str]]:
        with os.scandir(path) as entries:
            yield (entry.name for entry in entries)

    def make_dirs(self, path: str, mode: int) -> None:
        os.makedirs(path, mode=mode, exist_ok=True)
