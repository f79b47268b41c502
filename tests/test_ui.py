"""Tests for the desktop window, run on Qt's offscreen platform."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PyQt6.QtWidgets")

from PyQt6.QtGui import QPalette  # noqa: E402

from wushu_calendar.config import AppPalette, AppSettings  # noqa: E402
from wushu_calendar.services import CalendarService  # noqa: E402
from wushu_calendar.ui.main_window import MainWindow  # noqa: E402
from wushu_calendar.ui.styles.theme import apply_palette  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


@pytest.fixture
def window(qapp, calendar: CalendarService, app_settings: AppSettings) -> MainWindow:
    main_window = MainWindow(calendar=calendar, settings=app_settings)
    yield main_window
    main_window.close()


def _event_labels(window: MainWindow) -> list[str]:
    event_list = window.calendar_panel.event_list
    labels = []
    for row in range(event_list.count()):
        widget = event_list.itemWidget(event_list.item(row))
        if widget is not None:
            labels.extend(label.text() for label in widget.findChildren(QtWidgets.QLabel))
    return labels


def _form_values(**overrides) -> dict:
    values = {
        "title": "Forms",
        "date_key": "2024-01-10",
        "time": None,
        "duration": None,
        "recurrence": "none",
        "until": None,
    }
    values.update(overrides)
    return values


def test_malformed_date_is_ignored_silently(window: MainWindow, calendar: CalendarService) -> None:
    window.add_event(_form_values(date_key="10/01/2024"))

    assert len(calendar.store) == 0
    assert window.statusBar().currentMessage() == ""


def test_titles_are_shown_as_plain_text(window: MainWindow) -> None:
    window.add_event(_form_values(title="<i>Forms</i> & drills"))

    labels = _event_labels(window)

    assert any("&lt;i&gt;Forms&lt;/i&gt; &amp; drills" in label for label in labels)


def test_selecting_a_day_lists_its_events(window: MainWindow, calendar: CalendarService) -> None:
    calendar.add_event("Sparring", "2024-1-2", recurrence="weekly")

    window.select_day("2024-01-16")

    assert any("Sparring" in label for label in _event_labels(window))
    assert window.event_form.date_input.text() == "2024-01-16"


def test_palette_uses_calendar_colors(qapp) -> None:
    palette = AppPalette()

    apply_palette(qapp, palette)

    assert qapp.palette().color(QPalette.ColorRole.Link).name() == palette.accent_today
    assert qapp.palette().color(QPalette.ColorRole.PlaceholderText).name() == palette.text_secondary
