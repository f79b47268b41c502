from __future__ import annotations

from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QApplication

from ...config import AppPalette

_ROLE_COLORS = {
    QPalette.ColorRole.Window: "background_primary",
    QPalette.ColorRole.WindowText: "text_primary",
    QPalette.ColorRole.Base: "background_secondary",
    QPalette.ColorRole.AlternateBase: "surface",
    QPalette.ColorRole.Text: "text_primary",
    QPalette.ColorRole.PlaceholderText: "text_secondary",
    QPalette.ColorRole.Button: "accent_primary",
    QPalette.ColorRole.ButtonText: "background_primary",
    QPalette.ColorRole.Highlight: "accent_secondary",
    QPalette.ColorRole.Link: "accent_today",
}


def apply_palette(app: QApplication, palette: AppPalette) -> None:
    """Map the calendar palette onto Qt roles and install the day-cell stylesheet."""

    qt_palette = QPalette()
    for role, attribute in _ROLE_COLORS.items():
        qt_palette.setColor(role, QColor(getattr(palette, attribute)))
    app.setPalette(qt_palette)
    app.setStyleSheet(palette.as_stylesheet())
