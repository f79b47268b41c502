from __future__ import annotations

import html
from typing import Iterable

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ...domain import CalendarEvent
from ...services import DayCell, describe_event

_DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


class CalendarPanel(QWidget):
    day_selected = pyqtSignal(str)
    month_shift_requested = pyqtSignal(int)
    remove_requested = pyqtSignal(str)

    def __init__(self, *, first_weekday: int = 6) -> None:
        super().__init__()
        self.setObjectName("calendarPanel")
        self._first_weekday = first_weekday
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        header = QHBoxLayout()
        prev_button = QPushButton("‹")
        prev_button.setObjectName("navButton")
        prev_button.clicked.connect(lambda: self.month_shift_requested.emit(-1))
        self.month_label = QLabel("")
        self.month_label.setObjectName("title")
        next_button = QPushButton("›")
        next_button.setObjectName("navButton")
        next_button.clicked.connect(lambda: self.month_shift_requested.emit(1))
        header.addWidget(prev_button)
        header.addStretch(1)
        header.addWidget(self.month_label)
        header.addStretch(1)
        header.addWidget(next_button)
        layout.addLayout(header)

        self.grid = QGridLayout()
        self.grid.setSpacing(4)
        layout.addLayout(self.grid)

        self.date_label = QLabel("")
        self.date_label.setObjectName("title")
        layout.addWidget(self.date_label)

        self.event_list = QListWidget()
        layout.addWidget(self.event_list, stretch=1)

    def set_month(self, label: str, cells: Iterable[DayCell], leading_blanks: int) -> None:
        while self.grid.count():
            item = self.grid.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        for column in range(7):
            name = _DAY_NAMES[(self._first_weekday + column) % 7]
            self.grid.addWidget(QLabel(name), 0, column)

        self.month_label.setText(label)
        for index, cell in enumerate(cells, start=leading_blanks):
            row, column = divmod(index, 7)
            button = QPushButton(str(cell.day.day))
            button.setObjectName("dayCell")
            button.setProperty("selected", cell.is_selected)
            button.setProperty("today", cell.is_today)
            button.setProperty("hasEvents", cell.has_events)
            button.clicked.connect(lambda _checked=False, key=cell.key: self.day_selected.emit(key))
            self.grid.addWidget(button, row + 1, column)

    def set_selected_label(self, label: str) -> None:
        self.date_label.setText(label)

    def populate_events(self, events: Iterable[CalendarEvent]) -> None:
        self.event_list.clear()
        events = list(events)
        if not events:
            empty = QListWidgetItem("No events yet.")
            self.event_list.addItem(empty)
            return
        for event in events:
            row = QWidget()
            row_layout = QHBoxLayout(row)
            row_layout.setContentsMargins(4, 4, 4, 4)
            info = QLabel(f"<b>{html.escape(event.title)}</b><br/>{html.escape(describe_event(event))}")
            remove_button = QPushButton("Remove")
            remove_button.setObjectName("removeButton")
            remove_button.clicked.connect(lambda _checked=False, event_id=event.id: self.remove_requested.emit(event_id))
            row_layout.addWidget(info, stretch=1)
            row_layout.addWidget(remove_button)

            item = QListWidgetItem()
            item.setSizeHint(row.sizeHint())
            self.event_list.addItem(item)
            self.event_list.setItemWidget(item, row)
