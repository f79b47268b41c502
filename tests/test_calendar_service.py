"""Tests for the calendar session facade."""

from dataclasses import replace
from datetime import date

import pytest

from wushu_calendar.config import AppSettings, UiSettings
from wushu_calendar.data import EventStore, MemoryStorage
from wushu_calendar.domain import CalendarEvent, Recurrence
from wushu_calendar.services import CalendarService, FixedClock, ServiceContext, describe_event

from .conftest import TODAY


class TestAddEvent:
    def test_creates_and_persists(self, calendar: CalendarService, memory_storage: MemoryStorage) -> None:
        event = calendar.add_event("  Forms  ", "2024-01-01", time="18:00", duration="90",
                                   recurrence="weekly", until="2024-06-30")

        assert event is not None
        assert event.title == "Forms"
        assert event.recurrence is Recurrence.WEEKLY
        assert event.id.startswith("event-")
        assert EventStore(memory_storage).load() == [event]

    @pytest.mark.parametrize("title, date_key", [("", "2024-01-01"), ("   ", "2024-01-01"), ("Forms", "")])
    def test_ignores_blank_submissions(self, calendar: CalendarService, memory_storage: MemoryStorage,
                                       title: str, date_key: str) -> None:
        assert calendar.add_event(title, date_key) is None
        assert len(calendar.store) == 0
        assert memory_storage.writes == 0

    def test_blank_optionals_become_absent(self, calendar: CalendarService) -> None:
        event = calendar.add_event("Forms", "2024-01-01", time="", duration=" ", until="")
        assert event == CalendarEvent(id=event.id, title="Forms", date="2024-01-01")

    def test_ids_are_unique(self, calendar: CalendarService) -> None:
        ids = {calendar.add_event(f"Event {i}", "2024-01-01").id for i in range(200)}
        assert len(ids) == 200

    def test_unpadded_keys_are_normalised(self, calendar: CalendarService, memory_storage: MemoryStorage) -> None:
        one_off = calendar.add_event("Forms", "2024-1-5")
        weekly = calendar.add_event("Sparring", "2024-1-1", recurrence="weekly", until="2024-1-15")

        assert one_off.date == "2024-01-05"
        assert weekly.until == "2024-01-15"
        assert calendar.occurrences_on(date(2024, 1, 5)) == [one_off]
        assert calendar.occurrences_on(date(2024, 1, 15)) == [weekly]
        assert calendar.occurrences_on(date(2024, 1, 22)) == []
        assert [cell.key for cell in calendar.month_cells() if cell.has_events] == [
            "2024-01-01", "2024-01-05", "2024-01-08", "2024-01-15",
        ]
        assert EventStore(memory_storage).load() == [one_off, weekly]

    def test_rejects_malformed_date(self, calendar: CalendarService) -> None:
        with pytest.raises(ValueError):
            calendar.add_event("Forms", "01/01/2024")
        assert len(calendar.store) == 0


class TestQueries:
    def test_remove_then_query(self, calendar: CalendarService) -> None:
        weekly = calendar.add_event("Forms", "2024-01-01", recurrence=Recurrence.WEEKLY)
        one_off = calendar.add_event("Tournament", "2024-01-08")

        assert calendar.remove_event(weekly.id)

        assert calendar.occurrences_on(date(2024, 1, 8)) == [one_off]
        assert not calendar.has_events_on(date(2024, 1, 15))

    def test_selected_events_follow_selection(self, calendar: CalendarService) -> None:
        event = calendar.add_event("Dues", "2023-11-05", recurrence="monthly")
        assert calendar.selected_events() == []

        calendar.select_date("2024-02-05")

        assert calendar.selected_events() == [event]

    def test_session_loads_existing_events(self, app_settings: AppSettings, memory_storage: MemoryStorage,
                                           clock: FixedClock) -> None:
        first = CalendarService(ServiceContext(settings=app_settings, storage=memory_storage, clock=clock))
        event = first.add_event("Forms", "2024-01-10")

        second = CalendarService(ServiceContext(settings=app_settings, storage=memory_storage, clock=clock))

        assert second.occurrences_on(TODAY) == [event]


class TestMonthCells:
    def test_marks_today_selection_and_events(self, calendar: CalendarService) -> None:
        calendar.add_event("Forms", "2024-01-01", recurrence="weekly")
        calendar.select_date("2024-01-20")

        cells = calendar.month_cells()

        assert len(cells) == 31
        assert [cell.key for cell in cells if cell.has_events] == [
            "2024-01-01", "2024-01-08", "2024-01-15", "2024-01-22", "2024-01-29",
        ]
        assert [cell.day for cell in cells if cell.is_today] == [TODAY]
        assert [cell.day for cell in cells if cell.is_selected] == [date(2024, 1, 20)]

    def test_follows_month_shift(self, calendar: CalendarService) -> None:
        calendar.shift_month(1)

        cells = calendar.month_cells()

        assert cells[0].key == "2024-02-01"
        assert len(cells) == 29
        assert not any(cell.is_today or cell.is_selected for cell in cells)

    def test_leading_blanks_sunday_first(self, calendar: CalendarService) -> None:
        # January 2024 starts on a Monday
        assert calendar.leading_blanks() == 1

    def test_leading_blanks_monday_first(self, app_settings: AppSettings, memory_storage: MemoryStorage,
                                         clock: FixedClock) -> None:
        settings = replace(app_settings, ui=UiSettings(app_name="Wushu Calendar", week_start="monday"))
        calendar = CalendarService(ServiceContext(settings=settings, storage=memory_storage, clock=clock))
        assert calendar.leading_blanks() == 0


class TestDescribeEvent:
    def test_all_day(self) -> None:
        assert describe_event(CalendarEvent(id="x", title="T", date="2024-01-01")) == "All day"

    def test_full_details(self) -> None:
        event = CalendarEvent(id="x", title="T", date="2024-01-01", time="14:30", duration="45",
                              recurrence=Recurrence.WEEKLY, until="2024-03-01")
        assert describe_event(event) == "14:30 45 mins • weekly • until 2024-03-01"
