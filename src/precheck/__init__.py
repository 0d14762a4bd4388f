"""precheck: fluent precondition validators for strings, dates, files and directories.

Each validator wraps a named value in an immutable subject; checks either
return the subject for chaining or raise a field-tagged error.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters import InMemoryFileSystem, LocalFileSystem, MemoryNode

# ── Configuration ───────────────────────────────────────────────
from .config import DATE_FORMAT, DATE_TIME_FORMAT, DEFAULT_CONFIG, ValidatorConfig

# ── Exceptions ──────────────────────────────────────────────────
from .exceptions import (
    DateError,
    DirectoryError,
    ErrorCode,
    FileError,
    PatternError,
    PrecheckError,
    PreconditionError,
    StringError,
)

# ── Patterns ────────────────────────────────────────────────────
from .patterns import compile_pattern, match_all

# ── Ports ───────────────────────────────────────────────────────
from .ports import IFileSystem

# ── Validators ──────────────────────────────────────────────────
from .validators import (
    DateValidator,
    DirectoryValidator,
    FileValidator,
    PathSubject,
    StringValidator,
    Subject,
)

__all__ = [
    # Validators
    "Subject",
    "PathSubject",
    "StringValidator",
    "DateValidator",
    "FileValidator",
    "DirectoryValidator",
    # Configuration
    "ValidatorConfig",
    "DEFAULT_CONFIG",
    "DATE_FORMAT",
    "DATE_TIME_FORMAT",
    # Exceptions
    "ErrorCode",
    "PrecheckError",
    "PreconditionError",
    "PatternError",
    "StringError",
    "DateError",
    "FileError",
    "DirectoryError",
    # Patterns
    "compile_pattern",
    "match_all",
    # Ports & adapters
    "IFileSystem",
    "LocalFileSystem",
    "InMemoryFileSystem",
    "MemoryNode",
]

__version__ = "0.1.0"
