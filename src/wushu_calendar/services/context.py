from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..config import AppSettings, get_settings
from ..data import EventStore, FileStorage, PersistencePort
from .clock import Clock, SystemClock
from .navigator import CalendarNavigator


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root owning the event store and navigator of one session."""

    settings: AppSettings = field(default_factory=get_settings)
    storage: Optional[PersistencePort] = None
    clock: Clock = field(default_factory=SystemClock)
    events: EventStore = field(init=False)
    navigator: CalendarNavigator = field(init=False)

    def __post_init__(self) -> None:
        if self.storage is None:
            self.storage = FileStorage(
                directory=self.settings.storage.data_dir,
                key=self.settings.storage.storage_key,
            )
        self.events = EventStore(self.storage)
        self.events.load()
        self.navigator = CalendarNavigator(self.clock.today())
