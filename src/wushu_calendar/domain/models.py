from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .datekeys import format_date_key, parse_date_key
from .enums import Recurrence


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _recurrence(value: Any) -> Recurrence:
    if isinstance(value, Recurrence):
        return value
    return Recurrence(_optional_text(value) or Recurrence.NONE.value)


def _required_text(record: Dict[str, Any], key: str) -> str:
    value = _optional_text(record[key])
    if value is None:
        raise ValueError(f"Event record field {key!r} is empty")
    return value


@dataclass(frozen=True, slots=True)
class CalendarEvent:
    id: str
    title: str
    date: str
    time: Optional[str] = None
    duration: Optional[str] = None
    recurrence: Recurrence = Recurrence.NONE
    until: Optional[str] = None

    @property
    def is_recurring(self) -> bool:
        return self.recurrence is not Recurrence.NONE

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "CalendarEvent":
        if not isinstance(record, dict):
            raise TypeError(f"Event record must be a mapping, got {type(record).__name__}")
        anchor = format_date_key(parse_date_key(_required_text(record, "date")))
        until = _optional_text(record.get("until"))
        if until is not None:
            until = format_date_key(parse_date_key(until))
        return cls(
            id=_required_text(record, "id"),
            title=_required_text(record, "title"),
            date=anchor,
            time=_optional_text(record.get("time")),
            duration=_optional_text(record.get("duration")),
            recurrence=_recurrence(record.get("recurrence")),
            until=until,
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "date": self.date,
            "time": self.time,
            "duration": self.duration,
            "recurrence": self.recurrence.value,
            "until": self.until,
        }
