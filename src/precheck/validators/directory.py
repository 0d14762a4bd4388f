"""DirectoryValidator: existence, permission and emptiness checks on a directory."""

from __future__ import annotations

import logging
import os
from typing import Any

from ..exceptions import DirectoryError
from .base import PathSubject

logger = logging.getLogger("precheck.validators.directory")

_PSEUDO_ENTRIES = frozenset({".", ".."})


class DirectoryValidator(PathSubject):
    """
    Fluent checks over a directory path.

    Every check rejects a missing or blank path with ``EMPTY_VALUE`` before
    touching the filesystem. :meth:`ensure_exists` is the only member that
    changes the filesystem; :meth:`ensure_deletable` validates only.
    """

    value: str | None = None

    @classmethod
    def of(
        cls, field: str, value: str | os.PathLike[str] | None = None, **options: Any
    ) -> DirectoryValidator:
        return cls(field=field, value=value, **options)

    def _require_value(self) -> str:
        if self.value is None or self._is_blank(self.value):
            self._fail(DirectoryError.empty_value(self.field, self.value))
        return self.value

    def _first_entry(self, path: str) -> str | None:
        """Name of the first real entry in *path*, or ``None`` if it is empty."""
        try:
            with self.filesystem.scan(path) as entries:
                for name in entries:
                    if name not in _PSEUDO_ENTRIES:
                        return name
        except OSError as exc:
            self._fail(DirectoryError.cannot_scan(self.field, path), cause=exc)
        return None

    def must_exist(self) -> DirectoryValidator:
        path = self._require_value()
        if not self.filesystem.is_dir(path):
            self._fail(DirectoryError.not_exist(self.field, path))
        return self

    def must_not_exist(self) -> DirectoryValidator:
        path = self._require_value()
        if self.filesystem.is_dir(path):
            self._fail(DirectoryError.already_exists(self.field, path))
        return self

    def must_be_readable(self) -> DirectoryValidator:
        path = self.must_exist()._require_value()
        if not self.filesystem.is_readable(path):
            self._fail(DirectoryError.not_readable(self.field, path))
        return self

    def must_be_writable(self) -> DirectoryValidator:
        path = self.must_exist()._require_value()
        if not self.filesystem.is_writable(path):
            self._fail(DirectoryError.not_writable(self.field, path))
        return self

    def is_not_empty(self) -> bool:
        """Return whether the directory holds any entry. Not chainable."""
        path = self.must_exist()._require_value()
        return self._first_entry(path) is not None

    def must_be_empty(self) -> DirectoryValidator:
        path = self.must_exist()._require_value()
        if self._first_entry(path) is not None:
            self._fail(DirectoryError.not_empty(self.field, path))
        return self

    def ensure_exists(self) -> DirectoryValidator:
        """
        Create the directory, and its parent chain, unless it already exists.

        Calling this on an existing directory is a no-op.
        """
        path = self._require_value()
        if self.filesystem.is_dir(path):
            return self

        mode = self.config.directory_mode
        parent = os.path.dirname(os.path.normpath(path))
        if parent and not self.filesystem.is_dir(parent):
            try:
                self.filesystem.make_dirs(parent, mode)
            except OSError as exc:
                self._fail(DirectoryError.cannot_create(self.field, parent), cause=exc)

        try:
            self.filesystem.make_dirs(path, mode)
        except OSError as exc:
            self._fail(DirectoryError.cannot_create(self.field, path), cause=exc)

        logger.info("Created directory %s for field %r", path, self.field)
        return self

    def ensure_deletable(self, recursive: bool = False) -> DirectoryValidator:
        """
        Assert the directory may be deleted under the given policy.

        Without *recursive* the directory must be empty. Nothing is deleted.
        """
        self.must_exist()
        if not recursive and self.is_not_empty():
            self._fail(DirectoryError.not_empty(self.field, self._require_value()))
        return self
