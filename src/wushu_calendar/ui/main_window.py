from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QMainWindow, QSplitter

from ..config.settings import AppSettings
from ..domain import format_date_key
from ..services import CalendarService
from .components.calendar_panel import CalendarPanel
from .components.event_form import EventForm

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, *, calendar: CalendarService, settings: AppSettings) -> None:
        super().__init__()
        self.calendar = calendar
        self.settings = settings

        self.setWindowTitle(settings.ui.app_name)
        self.resize(980, 640)

        self.calendar_panel = CalendarPanel(first_weekday=settings.ui.first_weekday)
        self.event_form = EventForm()

        splitter = QSplitter()
        splitter.setOrientation(Qt.Orientation.Horizontal)
        splitter.addWidget(self.calendar_panel)
        splitter.addWidget(self.event_form)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 2)
        self.setCentralWidget(splitter)

        self.calendar_panel.day_selected.connect(self.select_day)
        self.calendar_panel.month_shift_requested.connect(self.shift_month)
        self.calendar_panel.remove_requested.connect(self.remove_event)
        self.event_form.submitted.connect(self.add_event)

        self.render_all()

    # ------------------------------------------------------------------ rendering

    def render_all(self) -> None:
        month = self.calendar.current_month
        self.calendar_panel.set_month(
            month.strftime("%B %Y"),
            self.calendar.month_cells(),
            self.calendar.leading_blanks(),
        )
        selected = self.calendar.selected_date
        self.calendar_panel.set_selected_label(selected.strftime("%A, %B %d, %Y"))
        self.calendar_panel.populate_events(self.calendar.selected_events())
        self.event_form.set_date(format_date_key(selected))

    # ------------------------------------------------------------------ actions

    def select_day(self, date_key: str) -> None:
        self.calendar.select_date(date_key)
        self.render_all()

    def shift_month(self, direction: int) -> None:
        self.calendar.shift_month(direction)
        self.render_all()

    def add_event(self, values: dict) -> None:
        try:
            event = self.calendar.add_event(**values)
        except ValueError as exc:
            logger.warning("Ignoring event form submission: %s", exc)
            return
        if event is None:
            return
        self.event_form.reset()
        self.statusBar().showMessage("Event saved.", 3000)
        self.render_all()

    def remove_event(self, event_id: str) -> None:
        self.calendar.remove_event(event_id)
        self.render_all()
