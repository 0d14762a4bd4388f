from .local import LocalFileSystem
from .memory import InMemoryFileSystem, MemoryNode

__all__ = [
    "InMemoryFileSystem",
    "LocalFileSystem",
    "MemoryNode",
]
