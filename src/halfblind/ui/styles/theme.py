"""Visual theme constants and QSS styles for the half-blind board."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the shadow board."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected origin square
    last_move_from: QColor  # last visible move origin
    last_move_to: QColor  # last visible move destination
    ghost_square: QColor  # tint under a half-blind ghost
    coord_light: QColor  # coordinate text on light squares
    coord_dark: QColor  # coordinate text on dark squares
    ghost_opacity: float = 0.35

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_from=QColor(255, 255, 0, 100),  # yellow transparent
            last_move_from=QColor(155, 199, 0, 105),  # green
            last_move_to=QColor(155, 199, 0, 105),
            ghost_square=QColor(90, 90, 160, 90),  # muted violet
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )

    @classmethod
    def slate(cls) -> BoardTheme:
        return cls(
            light_square=QColor(224, 226, 231),
            dark_square=QColor(101, 110, 122),
            highlight_from=QColor(255, 255, 0, 100),
            last_move_from=QColor(155, 199, 0, 105),
            last_move_to=QColor(155, 199, 0, 105),
            ghost_square=QColor(40, 40, 60, 110),
            coord_light=QColor(101, 110, 122),
            coord_dark=QColor(224, 226, 231),
            ghost_opacity=0.25,
        )


THEMES = {
    "default": BoardTheme.default,
    "slate": BoardTheme.slate,
}


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QLineEdit, QPlainTextEdit {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    font-family: "Consolas", monospace;
    font-size: 13px;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
QPushButton:disabled {
    color: #666;
    background: #2b2b2b;
}
"""
