"""Shared fixtures for precheck tests."""

from __future__ import annotations

import pytest

from precheck.adapters import InMemoryFileSystem


@pytest.fixture
def memory_fs() -> InMemoryFileSystem:
    """Empty in-memory filesystem containing only ``/``."""
    return InMemoryFileSystem()
