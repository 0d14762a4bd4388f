from .filesystem import IFileSystem

__all__ = [
    "IFileSystem",
]
