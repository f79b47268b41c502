from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QComboBox, QFormLayout, QLineEdit, QPushButton, QVBoxLayout, QWidget

from ...domain import Recurrence


class EventForm(QWidget):
    submitted = pyqtSignal(dict)

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("eventForm")
        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText("Title")
        form.addRow("Title", self.title_input)

        self.date_input = QLineEdit()
        self.date_input.setPlaceholderText("YYYY-MM-DD")
        form.addRow("Date", self.date_input)

        self.time_input = QLineEdit()
        self.time_input.setPlaceholderText("HH:MM (optional)")
        form.addRow("Time", self.time_input)

        self.duration_input = QLineEdit()
        self.duration_input.setPlaceholderText("Minutes (optional)")
        form.addRow("Duration", self.duration_input)

        self.recurrence_box = QComboBox()
        for recurrence in Recurrence:
            self.recurrence_box.addItem(recurrence.value.capitalize(), recurrence)
        form.addRow("Repeat", self.recurrence_box)

        self.until_input = QLineEdit()
        self.until_input.setPlaceholderText("YYYY-MM-DD (optional)")
        form.addRow("Until", self.until_input)

        layout.addLayout(form)

        submit = QPushButton("Add event")
        submit.clicked.connect(self._submit)
        layout.addWidget(submit)
        layout.addStretch(1)

    def set_date(self, date_key: str) -> None:
        self.date_input.setText(date_key)

    def values(self) -> dict[str, Optional[str]]:
        recurrence: Recurrence = self.recurrence_box.currentData()
        return {
            "title": self.title_input.text().strip(),
            "date_key": self.date_input.text().strip(),
            "time": self.time_input.text().strip() or None,
            "duration": self.duration_input.text().strip() or None,
            "recurrence": recurrence.value,
            "until": self.until_input.text().strip() or None,
        }

    def reset(self) -> None:
        self.title_input.clear()
        self.time_input.clear()
        self.duration_input.clear()
        self.recurrence_box.setCurrentIndex(0)
        self.until_input.clear()

    def _submit(self) -> None:
        self.submitted.emit(self.values())
