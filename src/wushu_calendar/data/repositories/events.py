from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

import orjson

from ...domain import CalendarEvent
from ..storage import PersistencePort

logger = logging.getLogger(__name__)


class EventStore:
    """In-memory event list that is written through to a persistence port.

    Insertion order is kept for display only. Every mutation saves the full
    list, overwriting whatever the port held before.
    """

    def __init__(self, storage: PersistencePort) -> None:
        self._storage = storage
        self._events: List[CalendarEvent] = []

    @property
    def events(self) -> Tuple[CalendarEvent, ...]:
        return tuple(self._events)

    def __iter__(self) -> Iterator[CalendarEvent]:
        return iter(tuple(self._events))

    def __len__(self) -> int:
        return len(self._events)

    def load(self) -> List[CalendarEvent]:
        """Replace the in-memory list with the persisted one.

        Absent or malformed data yields an empty list instead of an error.
        """

        try:
            raw = self._storage.read_all()
        except UnicodeDecodeError:
            logger.warning("Persisted events are not valid UTF-8; starting empty")
            raw = None
        self._events = self._decode(raw)
        logger.debug("Loaded %d events", len(self._events))
        return list(self._events)

    def save(self, events: Optional[Iterable[CalendarEvent]] = None) -> None:
        if events is not None:
            self._events = list(events)
        payload = orjson.dumps([event.to_record() for event in self._events])
        self._storage.write_all(payload.decode("utf-8"))

    def add(self, event: CalendarEvent) -> CalendarEvent:
        self._events.append(event)
        self.save()
        logger.info("Added event %s on %s (%s)", event.id, event.date, event.recurrence.value)
        return event

    def remove(self, event_id: str) -> bool:
        remaining = [event for event in self._events if event.id != event_id]
        removed = len(remaining) != len(self._events)
        self._events = remaining
        self.save()
        if removed:
            logger.info("Removed event %s", event_id)
        else:
            logger.debug("No event with id %s to remove", event_id)
        return removed

    def get(self, event_id: str) -> Optional[CalendarEvent]:
        for event in self._events:
            if event.id == event_id:
                return event
        return None

    @staticmethod
    def _decode(raw: Optional[str]) -> List[CalendarEvent]:
        if not raw:
            return []
        try:
            records = orjson.loads(raw)
        except orjson.JSONDecodeError:
            logger.warning("Persisted events are not valid JSON; starting empty")
            return []
        if not isinstance(records, list):
            logger.warning("Persisted events are not a list; starting empty")
            return []
        try:
            return [CalendarEvent.from_record(record) for record in records]
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Persisted events are malformed (%s); starting empty", exc)
            return []
