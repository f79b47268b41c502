"""Domain models and recurrence rules for the calendar."""

from __future__ import annotations

from .datekeys import InvalidDateKeyError, format_date_key, is_date_key, parse_date_key
from .enums import Recurrence
from .models import CalendarEvent
from .recurrence import has_events_on, occurrences_on, occurs_on

__all__ = [
    "CalendarEvent",
    "InvalidDateKeyError",
    "Recurrence",
    "format_date_key",
    "has_events_on",
    "is_date_key",
    "occurrences_on",
    "occurs_on",
    "parse_date_key",
]
