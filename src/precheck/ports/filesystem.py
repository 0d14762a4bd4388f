"""IFileSystem: protocol for the filesystem queries the validators consume."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator
    from contextlib import AbstractContextManager


@runtime_checkable
class IFileSystem(Protocol):
    """
    Read-mostly view of a filesystem.

    ``make_dirs`` is the only mutating operation. Implementations raise
    ``OSError`` when a listing cannot be opened or a directory cannot be
    created; every other query answers with a plain value.
    """

    def exists(self, path: str) -> bool:
        """True if *path* names any filesystem object."""
        ...

    def is_dir(self, path: str) -> bool: ...

    def is_file(self, path: str) -> bool: ...

    def is_readable(self, path: str) -> bool: ...

    def is_writable(self, path: str) -> bool: ...

    def size(self, path: str) -> int:
        """Size of the file at *path* in bytes."""
        ...

    def scan(self, path: str) -> AbstractContextManager[Iterator[str]]:
        """
        Open the listing of directory *path*.

        The returned context manager yields an iterator of entry names and
        releases the listing handle on exit, however the block is left.
        """
        ...

    def make_dirs(self, path: str, mode: int) -> None:
        """
        Create *path* and any missing parents with permission *mode*.

        An already existing directory at *path* is not an error.
        """
        ...
