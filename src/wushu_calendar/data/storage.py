"""Persistence boundary for the serialized event list."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol


class PersistencePort(Protocol):
    """Synchronous read/write surface holding one raw text blob."""

    def read_all(self) -> Optional[str]:
        ...

    def write_all(self, raw: str) -> None:
        ...


@dataclass
class FileStorage:
    """Keeps the blob in ``<directory>/<key>.json``."""

    directory: Path
    key: str

    @property
    def path(self) -> Path:
        return self.directory / f"{self.key}.json"

    def read_all(self) -> Optional[str]:
        if not self.path.exists():
            return None
        return self.path.read_bytes().decode("utf-8")

    def write_all(self, raw: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(raw.encode("utf-8"))


@dataclass
class MemoryStorage:
    raw: Optional[str] = None
    writes: int = 0

    def read_all(self) -> Optional[str]:
        return self.raw

    def write_all(self, raw: str) -> None:
        self.raw = raw
        self.writes += 1
