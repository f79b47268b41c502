"""Repositories for first-class domain objects."""

from __future__ import annotations

from .events import EventStore

__all__ = ["EventStore"]
