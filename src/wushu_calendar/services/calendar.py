from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Union
from uuid import uuid4

from ..data import EventStore
from ..domain import CalendarEvent, Recurrence, format_date_key, has_events_on, occurrences_on
from .context import ServiceContext
from .navigator import CalendarNavigator

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DayCell:
    day: date
    key: str
    is_selected: bool
    is_today: bool
    has_events: bool


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def new_event_id() -> str:
    return f"event-{uuid4().hex}"


def describe_event(event: CalendarEvent) -> str:
    """One-line summary such as ``14:30 45 mins • weekly • until 2024-03-01``."""

    parts = [event.time or "All day"]
    if event.duration:
        parts.append(f"{event.duration} mins")
    if event.is_recurring:
        parts.append(f"• {event.recurrence.value}")
    if event.until:
        parts.append(f"• until {event.until}")
    return " ".join(parts)


@dataclass(slots=True)
class CalendarService:
    context: ServiceContext

    @property
    def store(self) -> EventStore:
        return self.context.events

    @property
    def navigator(self) -> CalendarNavigator:
        return self.context.navigator

    @property
    def current_month(self) -> date:
        return self.navigator.current_month

    @property
    def selected_date(self) -> date:
        return self.navigator.selected_date

    def today(self) -> date:
        return self.context.clock.today()

    # ------------------------------------------------------------------ commands

    def add_event(
        self,
        title: str,
        date_key: str,
        *,
        time: Optional[str] = None,
        duration: Optional[str] = None,
        recurrence: Union[Recurrence, str] = Recurrence.NONE,
        until: Optional[str] = None,
    ) -> Optional[CalendarEvent]:
        """Create and persist an event; blank title or date is ignored.

        Returns ``None`` when the submission is ignored.
        """

        title = (title or "").strip()
        date_key = (date_key or "").strip()
        if not title or not date_key:
            logger.debug("Ignoring event submission without title or date")
            return None
        event = CalendarEvent.from_record(
            {
                "id": new_event_id(),
                "title": title,
                "date": date_key,
                "time": _blank_to_none(time),
                "duration": _blank_to_none(duration),
                "recurrence": Recurrence(recurrence).value,
                "until": _blank_to_none(until),
            }
        )
        return self.store.add(event)

    def remove_event(self, event_id: str) -> bool:
        return self.store.remove(event_id)

    def select_date(self, date_key: str) -> date:
        return self.navigator.select_date(date_key)

    def shift_month(self, direction: int) -> date:
        return self.navigator.shift_month(direction)

    # ------------------------------------------------------------------ queries

    def occurrences_on(self, day: date) -> List[CalendarEvent]:
        return occurrences_on(self.store, day)

    def has_events_on(self, day: date) -> bool:
        return has_events_on(self.store, day)

    def selected_events(self) -> List[CalendarEvent]:
        return self.occurrences_on(self.selected_date)

    def leading_blanks(self) -> int:
        return self.navigator.leading_blanks(self.context.settings.ui.first_weekday)

    def month_cells(self) -> List[DayCell]:
        today = self.today()
        selected = self.selected_date
        return [
            DayCell(
                day=day,
                key=format_date_key(day),
                is_selected=day == selected,
                is_today=day == today,
                has_events=self.has_events_on(day),
            )
            for day in self.navigator.visible_days()
        ]
