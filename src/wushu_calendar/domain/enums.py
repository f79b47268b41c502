from __future__ import annotations

from enum import Enum


class Recurrence(str, Enum):
    NONE = "none"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
