"""FileValidator: existence, type, extension, permission and size checks."""

from __future__ import annotations

import os
from typing import Any

from ..exceptions import FileError
from .base import PathSubject


def extension_of(path: str) -> str:
    """
    Return the extension of the final component of *path*.

    The extension is everything after the last ``.``; a name without a dot,
    or ending in one, has none. Dotfiles such as ``.env`` count as having
    the extension ``env``.
    """
    name = os.path.basename(path.rstrip("/" + os.sep) or path)
    _, dot, extension = name.rpartition(".")
    if not dot:
        return ""
    return extension


class FileValidator(PathSubject):
    """
    Fluent checks over a file path.

    Permission and size checks require the path to exist and raise
    ``NOT_FOUND`` first. :meth:`must_be_file` does not; a missing path
    simply fails it with ``NOT_FILE``.
    """

    value: str

    @classmethod
    def of(
        cls, field: str, value: str | os.PathLike[str], **options: Any
    ) -> FileValidator:
        return cls(field=field, value=value, **options)

    @property
    def extension(self) -> str:
        return extension_of(self.value)

    def must_have_extension(self) -> FileValidator:
        if not self.extension:
            self._fail(FileError.no_extension(self.field, self.value))
        return self

    def must_not_exist(self) -> FileValidator:
        if self.filesystem.exists(self.value):
            self._fail(FileError.exists(self.field, self.value))
        return self

    def must_exist(self) -> FileValidator:
        if not self.filesystem.exists(self.value):
            self._fail(FileError.not_found(self.field, self.value))
        return self

    def must_be_file(self) -> FileValidator:
        if not self.filesystem.is_file(self.value):
            self._fail(FileError.not_file(self.field, self.value))
        return self

    def must_be_readable(self) -> FileValidator:
        self.must_exist()
        if not self.filesystem.is_readable(self.value):
            self._fail(FileError.not_readable(self.field, self.value))
        return self

    def must_be_writable(self) -> FileValidator:
        self.must_exist()
        if not self.filesystem.is_writable(self.value):
            self._fail(FileError.not_writable(self.field, self.value))
        return self

    def must_be_extension(self, *extensions: str) -> FileValidator:
        """Require the extension to be one of *extensions*, ignoring case."""
        extension = self.extension.lower()
        if extension not in {allowed.lower() for allowed in extensions}:
            self._fail(
                FileError.invalid_extension(self.field, extension, list(extensions))
            )
        return self

    def must_not_be_empty(self) -> FileValidator:
        self.must_exist()
        if self.filesystem.size(self.value) == 0:
            self._fail(FileError.not_empty(self.field, self.value))
        return self

    def must_not_exceed_size(self, max_size: int) -> FileValidator:
        self.must_exist()
        actual_size = self.filesystem.size(self.value)
        if actual_size > max_size:
            self._fail(FileError.too_big(max_size, self.field, actual_size))
        return self
