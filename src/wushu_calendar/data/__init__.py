"""Data access layer."""

from __future__ import annotations

from .repositories import EventStore
from .storage import FileStorage, MemoryStorage, PersistencePort

__all__ = ["EventStore", "FileStorage", "MemoryStorage", "PersistencePort"]
