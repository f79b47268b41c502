"""Application services orchestrating data access and domain logic."""

from __future__ import annotations

from .calendar import CalendarService, DayCell, describe_event
from .clock import Clock, FixedClock, SystemClock
from .context import ServiceContext
from .navigator import CalendarNavigator

__all__ = [
    "CalendarNavigator",
    "CalendarService",
    "Clock",
    "DayCell",
    "FixedClock",
    "ServiceContext",
    "SystemClock",
    "describe_event",
]
