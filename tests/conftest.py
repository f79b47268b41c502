"""Shared fixtures: in-memory storage, a pinned clock and a ready session."""

from datetime import date
from pathlib import Path

import pytest

from wushu_calendar.config import AppSettings, LoggingSettings, StorageSettings, UiSettings
from wushu_calendar.data import EventStore, MemoryStorage
from wushu_calendar.services import CalendarService, FixedClock, ServiceContext

TODAY = date(2024, 1, 10)


@pytest.fixture
def memory_storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(TODAY)


@pytest.fixture
def store(memory_storage: MemoryStorage) -> EventStore:
    event_store = EventStore(memory_storage)
    event_store.load()
    return event_store


@pytest.fixture
def app_settings(tmp_path: Path) -> AppSettings:
    return AppSettings(
        storage=StorageSettings(data_dir=tmp_path, storage_key="wushuEvents"),
        logging=LoggingSettings(level="DEBUG", log_dir=tmp_path / "logs"),
        ui=UiSettings(app_name="Wushu Calendar", week_start="sunday"),
    )


@pytest.fixture
def context(app_settings: AppSettings, memory_storage: MemoryStorage, clock: FixedClock) -> ServiceContext:
    return ServiceContext(settings=app_settings, storage=memory_storage, clock=clock)


@pytest.fixture
def calendar(context: ServiceContext) -> CalendarService:
    return CalendarService(context)
