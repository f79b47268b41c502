from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Protocol


class Clock(Protocol):
    def today(self) -> date:
        ...


class SystemClock:
    def today(self) -> date:
        return date.today()


@dataclass
class FixedClock:
    """Clock pinned to one day, for tests and reproducible sessions."""

    day: date

    def today(self) -> date:
        return self.day
