from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppPalette:
    background_primary: str = "#0b1120"
    background_secondary: str = "#111a2e"
    surface: str = "#16213b"
    accent_primary: str = "#f59e0b"
    accent_secondary: str = "#ef4444"
    accent_today: str = "#38bdf8"
    text_primary: str = "#f8fafc"
    text_secondary: str = "#94a3b8"
    border_subtle: str = "#1e293b"
    border_strong: str = "#334155"

    def as_stylesheet(self) -> str:
        """Global stylesheet for the calendar window and its day cells."""

        return f"""
        QWidget {{
            background-color: {self.background_primary};
            color: {self.text_primary};
            font-family: 'Helvetica Neue', 'Segoe UI', Arial, sans-serif;
            font-size: 14px;
        }}
        QPushButton {{
            background-color: {self.accent_primary};
            color: {self.background_primary};
            border: none;
            padding: 8px 14px;
            border-radius: 8px;
            font-weight: 600;
        }}
        QPushButton:disabled {{
            background-color: {self.border_subtle};
            color: {self.text_secondary};
        }}
        QPushButton#navButton, QPushButton#removeButton {{
            background-color: transparent;
            color: {self.accent_primary};
            border: 1px solid {self.accent_primary};
        }}
        QPushButton#dayCell {{
            background-color: {self.surface};
            color: {self.text_primary};
            border: 1px solid {self.border_subtle};
            border-radius: 6px;
            padding: 6px;
        }}
        QPushButton#dayCell[today="true"] {{
            border-color: {self.accent_today};
        }}
        QPushButton#dayCell[hasEvents="true"] {{
            font-weight: 800;
            color: {self.accent_primary};
        }}
        QPushButton#dayCell[selected="true"] {{
            background-color: {self.accent_secondary};
            color: {self.text_primary};
        }}
        QLineEdit, QComboBox {{
            background-color: {self.background_secondary};
            color: {self.text_primary};
            border: 1px solid {self.border_strong};
            border-radius: 8px;
            padding: 8px 10px;
        }}
        QLineEdit:focus, QComboBox:focus {{
            border-color: {self.accent_primary};
        }}
        QListWidget {{
            background-color: {self.background_secondary};
            border: 1px solid {self.border_strong};
        }}
        QLabel#title {{
            font-size: 18px;
            font-weight: 700;
        }}
        QLabel#eventEmpty {{
            color: {self.text_secondary};
        }}
        QWidget#calendarPanel, QWidget#eventForm {{
            background-color: {self.surface};
        }}
        """
