"""Canonical ``YYYY-MM-DD`` keys used as the identity of a calendar day."""

from __future__ import annotations

from datetime import date, datetime

DATE_KEY_SEPARATOR = "-"


class InvalidDateKeyError(ValueError):
    """Raised when a string cannot be read as a date key."""


def as_day(value: date) -> date:
    """Drop any time-of-day component so comparisons are calendar-only."""

    if isinstance(value, datetime):
        return value.date()
    return value


def format_date_key(value: date) -> str:
    day = as_day(value)
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def parse_date_key(key: str) -> date:
    """Inverse of :func:`format_date_key`.

    Unpadded keys such as ``2024-1-5`` are accepted. Anything that does not
    split into exactly three integers naming a real day raises
    :class:`InvalidDateKeyError`.
    """

    if not isinstance(key, str):
        raise InvalidDateKeyError(f"Date key must be a string, got {key!r}")
    parts = key.strip().split(DATE_KEY_SEPARATOR)
    if len(parts) != 3 or not all(part.isascii() and part.isdigit() for part in parts):
        raise InvalidDateKeyError(f"Malformed date key: {key!r}")
    year, month, day = (int(part) for part in parts)
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDateKeyError(f"Date key out of range: {key!r}") from exc


def is_date_key(key: object) -> bool:
    try:
        parse_date_key(key)  # type: ignore[arg-type]
    except InvalidDateKeyError:
        return False
    return True
