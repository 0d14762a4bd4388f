"""InMemoryFileSystem: dict-backed fake for unit tests."""

from __future__ import annotations

import errno
import posixpath
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..ports.filesystem import IFileSystem

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass
class MemoryNode:
    """A file or directory held by :class:`InMemoryFileSystem`."""

    is_dir: bool
    content: bytes = b""
    readable: bool = True
    writable: bool = True
    mode: int | None = None


class InMemoryFileSystem(IFileSystem):
    """In-memory implementation of ``IFileSystem``.

    Paths are POSIX-style and normalised before lookup. Permission bits are
    explicit flags on each node, and scan or create failures can be injected
    per path. ``open_scans`` counts listings that have not been released.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, MemoryNode] = {"/": MemoryNode(is_dir=True)}
        self._unscannable: set[str] = set()
        self._uncreatable: set[str] = set()
        self.open_scans = 0

    # ── Seeding ──────────────────────────────────────────────────

    def add_dir(
        self, path: str, *, readable: bool = True, writable: bool = True
    ) -> MemoryNode:
        key = self._key(path)
        self._ensure_parents(key)
        node = MemoryNode(is_dir=True, readable=readable, writable=writable)
        self._nodes[key] = node
        return node

    def add_file(
        self,
        path: str,
        content: bytes = b"",
        *,
        readable: bool = True,
        writable: bool = True,
    ) -> MemoryNode:
        key = self._key(path)
        self._ensure_parents(key)
        node = MemoryNode(
            is_dir=False, content=content, readable=readable, writable=writable
        )
        self._nodes[key] = node
        return node

    def fail_scan(self, path: str) -> None:
        """Make every listing of *path* raise ``PermissionError``."""
        self._unscannable.add(self._key(path))

    def fail_create(self, path: str) -> None:
        """Make creation of *path* raise ``PermissionError``."""
        self._uncreatable.add(self._key(path))

    def node(self, path: str) -> MemoryNode | None:
        return self._nodes.get(self._key(path))

    # ── IFileSystem ──────────────────────────────────────────────

    def exists(self, path: str) -> bool:
        return self._key(path) in self._nodes

    def is_dir(self, path: str) -> bool:
        node = self.node(path)
        return node is not None and node.is_dir

    def is_file(self, path: str) -> bool:
        node = self.node(path)
        return node is not None and not node.is_dir

    def is_readable(self, path: str) -> bool:
        node = self.node(path)
        return node is not None and node.readable

    def is_writable(self, path: str) -> bool:
        node = self.node(path)
        return node is not None and node.writable

    def size(self, path: str) -> int:
        node = self.node(path)
        if node is None:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        return len(node.content)

    @contextmanager
    def scan(self, path: str) -> Iterator[Iterator[str]]:
        key = self._key(path)
        node = self._nodes.get(key)
        if node is None:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        if not node.is_dir:
            raise NotADirectoryError(errno.ENOTDIR, "Not a directory", path)
        if key in self._unscannable or not node.readable:
            raise PermissionError(errno.EACCES, "Permission denied", path)

        self.open_scans += 1
        try:
            yield iter(self._children(key))
        finally:
            self.open_scans -= 1

    def make_dirs(self, path: str, mode: int) -> None:
        key = self._key(path)
        missing: list[str] = []
        current = key
        while current not in self._nodes:
            missing.append(current)
            parent = posixpath.dirname(current)
            if parent == current:
                break
            current = parent
        if current in self._nodes and not self._nodes[current].is_dir:
            raise FileExistsError(errno.EEXIST, "File exists", current)

        for target in reversed(missing):
            if target in self._uncreatable:
                raise PermissionError(errno.EACCES, "Permission denied", target)
            self._nodes[target] = MemoryNode(is_dir=True, mode=mode)

    # ── Helpers ──────────────────────────────────────────────────

    @staticmethod
    def _key(path: str) -> str:
        return posixpath.normpath(posixpath.join("/", path))

    def _children(self, key: str) -> list[str]:
        return sorted(
            posixpath.basename(candidate)
            for candidate in self._nodes
            if candidate != key and posixpath.dirname(candidate) == key
        )

    def _ensure_parents(self, key: str) -> None:
        parent = posixpath.dirname(key)
        if parent not in self._nodes:
            self.make_dirs(parent, 0o755)
