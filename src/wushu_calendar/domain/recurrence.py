"""Decide which stored events fall on a given calendar day.

Nothing here is cached: every query walks the full event list. Event lists are
small and a month view asks about at most 42 days, so recomputing is cheap.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, List

from .datekeys import as_day, format_date_key, parse_date_key
from .enums import Recurrence
from .models import CalendarEvent


def occurs_on(event: CalendarEvent, day: date) -> bool:
    day = as_day(day)
    if event.recurrence is Recurrence.NONE:
        return format_date_key(day) == event.date

    start = parse_date_key(event.date)
    if day < start:
        return False
    # until is inclusive; an until before the anchor simply matches nothing
    if event.until and day > parse_date_key(event.until):
        return False

    if event.recurrence is Recurrence.WEEKLY:
        return day.weekday() == start.weekday()
    if event.recurrence is Recurrence.MONTHLY:
        # no end-of-month rollover: a day-31 anchor skips shorter months
        return day.day == start.day
    return False


def occurrences_on(events: Iterable[CalendarEvent], day: date) -> List[CalendarEvent]:
    return [event for event in events if occurs_on(event, day)]


def has_events_on(events: Iterable[CalendarEvent], day: date) -> bool:
    return len(occurrences_on(events, day)) > 0
