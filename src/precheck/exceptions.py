"""
Precondition error hierarchy.

Every validator family raises exactly one exception type. The variant of a
failure is carried as an :class:`ErrorCode`, and the diagnostic payload
(limits, expected value, pattern, format, path) travels in ``context`` so
callers never have to parse messages.

All exceptions inherit from ``PrecheckError`` and provide ``to_dict()`` for
API-friendly error responses.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar


class ErrorCode(str, Enum):
    """Named precondition violations shared by all validator families."""

    EMPTY_VALUE = "EMPTY_VALUE"
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    NOT_EQUAL = "NOT_EQUAL"
    NOT_MATCH = "NOT_MATCH"
    INVALID_CHARACTERS = "INVALID_CHARACTERS"
    INVALID_DATE = "INVALID_DATE"
    NO_EXTENSION = "NO_EXTENSION"
    NOT_FOUND = "NOT_FOUND"
    EXISTS = "EXISTS"
    NOT_FILE = "NOT_FILE"
    NOT_READABLE = "NOT_READABLE"
    NOT_WRITABLE = "NOT_WRITABLE"
    INVALID_EXTENSION = "INVALID_EXTENSION"
    NOT_EMPTY = "NOT_EMPTY"
    TOO_BIG = "TOO_BIG"
    NOT_EXIST = "NOT_EXIST"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    CANNOT_SCAN = "CANNOT_SCAN"
    CANNOT_CREATE = "CANNOT_CREATE"


class PrecheckError(Exception):
    """Root exception for the precheck toolkit."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class PatternError(PrecheckError, ValueError):
    """A pattern handed to a string check could not be compiled."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_PATTERN",
            "pattern": self.pattern,
            "reason": self.reason,
        }


class PreconditionError(PrecheckError):
    """
    A validated value violated a rule.

    Subclasses define ``family`` and a ``messages`` table mapping each
    :class:`ErrorCode` they can raise to a message template. Templates are
    formatted with ``field``, ``value`` and every ``context`` key.
    """

    family: ClassVar[str] = "precondition"
    messages: ClassVar[dict[ErrorCode, str]] = {}

    def __init__(
        self,
        code: ErrorCode,
        field: str,
        value: Any = None,
        **context: Any,
    ) -> None:
        self.code = code
        self.field = field
        self.value = value
        self.context = context
        self.message = self._render()
        super().__init__(self.message)

    def _render(self) -> str:
        template = self.messages.get(self.code)
        if template is None:
            return f"{self.field}: {self.code.value}"
        return template.format(field=self.field, value=self.value, **self.context)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code.value,
            "family": self.family,
            "field": self.field,
            "value": self.value,
            "message": self.message,
            **self.context,
        }


class StringError(PreconditionError):
    """String value violated a length, equality or pattern rule."""

    family = "string"
    messages = {
        ErrorCode.EMPTY_VALUE: "{field} must not be empty",
        ErrorCode.TOO_SHORT: (
            "{field} must be at least {min_length} characters long, "
            "got {actual_length}"
        ),
        ErrorCode.TOO_LONG: (
            "{field} must be at most {max_length} characters long, "
            "got {actual_length}"
        ),
        ErrorCode.NOT_EQUAL: "{field} must equal {expected!r}",
        ErrorCode.NOT_MATCH: "{field} does not match pattern {pattern}",
        ErrorCode.INVALID_CHARACTERS: (
            "{field} contains invalid characters: {characters}"
        ),
    }

    @classmethod
    def empty_value(cls, field: str) -> StringError:
        return cls(ErrorCode.EMPTY_VALUE, field)

    @classmethod
    def too_short(
        cls, min_length: int, value: str, field: str, actual_length: int
    ) -> StringError:
        return cls(
            ErrorCode.TOO_SHORT,
            field,
            value,
            min_length=min_length,
            actual_length=actual_length,
        )

    @classmethod
    def too_long(
        cls, max_length: int, value: str, field: str, actual_length: int
    ) -> StringError:
        return cls(
            ErrorCode.TOO_LONG,
            field,
            value,
            max_length=max_length,
            actual_length=actual_length,
        )

    @classmethod
    def not_equal(cls, expected: str, value: str, field: str) -> StringError:
        return cls(ErrorCode.NOT_EQUAL, field, value, expected=expected)

    @classmethod
    def not_match(cls, pattern: str, value: str, field: str) -> StringError:
        return cls(ErrorCode.NOT_MATCH, field, value, pattern=pattern)

    @classmethod
    def invalid_characters(
        cls, characters: str, value: str, field: str
    ) -> StringError:
        return cls(ErrorCode.INVALID_CHARACTERS, field, value, characters=characters)


class DateError(PreconditionError):
    """Date value was empty or did not round-trip through its format."""

    family = "date"
    messages = {
        ErrorCode.EMPTY_VALUE: "{field} must not be empty",
        ErrorCode.INVALID_DATE: (
            "{field} is not a valid date in format {format!r}: {value!r}"
        ),
    }

    @classmethod
    def empty_value(cls, field: str) -> DateError:
        return cls(ErrorCode.EMPTY_VALUE, field)

    @classmethod
    def invalid_date(cls, field: str, value: str, date_format: str) -> DateError:
        return cls(ErrorCode.INVALID_DATE, field, value, format=date_format)


class FileError(PreconditionError):
    """File path failed an existence, type, permission or size rule."""

    family = "file"
    messages = {
        ErrorCode.NO_EXTENSION: "{field} has no file extension: {value}",
        ErrorCode.EXISTS: "{field} already exists: {value}",
        ErrorCode.NOT_FOUND: "{field} not found: {value}",
        ErrorCode.NOT_FILE: "{field} is not a regular file: {value}",
        ErrorCode.NOT_READABLE: "{field} is not readable: {value}",
        ErrorCode.NOT_WRITABLE: "{field} is not writable: {value}",
        ErrorCode.INVALID_EXTENSION: (
            "{field} has extension {value!r}, expected one of: {allowed}"
        ),
        ErrorCode.NOT_EMPTY: "{field} must not be an empty file: {value}",
        ErrorCode.TOO_BIG: (
            "{field} is {actual_size} bytes, exceeding the limit of "
            "{max_size} bytes"
        ),
    }

    @classmethod
    def no_extension(cls, field: str, value: str) -> FileError:
        return cls(ErrorCode.NO_EXTENSION, field, value)

    @classmethod
    def exists(cls, field: str, value: str) -> FileError:
        return cls(ErrorCode.EXISTS, field, value)

    @classmethod
    def not_found(cls, field: str, value: str) -> FileError:
        return cls(ErrorCode.NOT_FOUND, field, value)

    @classmethod
    def not_file(cls, field: str, value: str) -> FileError:
        return cls(ErrorCode.NOT_FILE, field, value)

    @classmethod
    def not_readable(cls, field: str, value: str) -> FileError:
        return cls(ErrorCode.NOT_READABLE, field, value)

    @classmethod
    def not_writable(cls, field: str, value: str) -> FileError:
        return cls(ErrorCode.NOT_WRITABLE, field, value)

    @classmethod
    def invalid_extension(
        cls, field: str, extension: str, allowed: list[str]
    ) -> FileError:
        return cls(
            ErrorCode.INVALID_EXTENSION,
            field,
            extension,
            allowed=", ".join(allowed),
            allowed_extensions=list(allowed),
        )

    @classmethod
    def not_empty(cls, field: str, value: str) -> FileError:
        return cls(ErrorCode.NOT_EMPTY, field, value)

    @classmethod
    def too_big(cls, max_size: int, field: str, actual_size: int) -> FileError:
        return cls(
            ErrorCode.TOO_BIG,
            field,
            actual_size,
            max_size=max_size,
            actual_size=actual_size,
        )


class DirectoryError(PreconditionError):
    """Directory path failed an existence, permission, emptiness or creation rule."""

    family = "directory"
    messages = {
        ErrorCode.EMPTY_VALUE: "{field} must not be empty",
        ErrorCode.NOT_EXIST: "{field} directory does not exist: {value}",
        ErrorCode.ALREADY_EXISTS: "{field} directory already exists: {value}",
        ErrorCode.NOT_READABLE: "{field} directory is not readable: {value}",
        ErrorCode.NOT_WRITABLE: "{field} directory is not writable: {value}",
        ErrorCode.CANNOT_SCAN: "{field} directory cannot be scanned: {value}",
        ErrorCode.NOT_EMPTY: "{field} directory is not empty: {value}",
        ErrorCode.CANNOT_CREATE: "{field} directory cannot be created: {path}",
    }

    @classmethod
    def empty_value(cls, field: str, value: str | None) -> DirectoryError:
        return cls(ErrorCode.EMPTY_VALUE, field, value)

    @classmethod
    def not_exist(cls, field: str, value: str) -> DirectoryError:
        return cls(ErrorCode.NOT_EXIST, field, value)

    @classmethod
    def already_exists(cls, field: str, value: str) -> DirectoryError:
        return cls(ErrorCode.ALREADY_EXISTS, field, value)

    @classmethod
    def not_readable(cls, field: str, value: str) -> DirectoryError:
        return cls(ErrorCode.NOT_READABLE, field, value)

    @classmethod
    def not_writable(cls, field: str, value: str) -> DirectoryError:
        return cls(ErrorCode.NOT_WRITABLE, field, value)

    @classmethod
    def cannot_scan(cls, field: str, value: str) -> DirectoryError:
        return cls(ErrorCode.CANNOT_SCAN, field, value)

    @classmethod
    def not_empty(cls, field: str, value: str) -> DirectoryError:
        return cls(ErrorCode.NOT_EMPTY, field, value)

    @classmethod
    def cannot_create(cls, field: str, path: str) -> DirectoryError:
        return cls(ErrorCode.CANNOT_CREATE, field, path, path=path)
