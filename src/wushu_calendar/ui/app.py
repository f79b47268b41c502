from __future__ import annotations

import sys
from typing import Optional

from PyQt6.QtWidgets import QApplication

from ..bootstrap import configure_logging
from ..config import AppPalette, get_settings
from ..services import CalendarService, ServiceContext
from .main_window import MainWindow
from .styles.theme import apply_palette


def run_gui(context: Optional[ServiceContext] = None) -> None:
    configure_logging()
    app = QApplication.instance() or QApplication(sys.argv)
    settings = get_settings()
    apply_palette(app, AppPalette())

    calendar = CalendarService(context or ServiceContext(settings=settings))
    window = MainWindow(calendar=calendar, settings=settings)
    window.show()
    sys.exit(app.exec())
