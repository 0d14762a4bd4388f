from .base import PathSubject, Subject
from .date import DateValidator, format_strict, parse_strict
from .directory import DirectoryValidator
from .file import FileValidator, extension_of
from .string import StringValidator

__all__ = [
    "DateValidator",
    "DirectoryValidator",
    "FileValidator",
    "PathSubject",
    "StringValidator",
    "Subject",
    "extension_of",
    "format_strict",
    "parse_strict",
]
