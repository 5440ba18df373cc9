"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from halfblind.core.notation import STARTING_FEN
from halfblind.game.config import TrackerConfig

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from halfblind.ui.styles.theme import APP_STYLE

    app.setApplicationName("Half-Blind Chess")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None,
    *,
    position: str = STARTING_FEN,
    config: TrackerConfig | None = None,
    theme: str = "default",
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from halfblind.ui.main_window import MainWindow
    from halfblind.ui.styles.theme import THEMES

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(position, config=config, theme=THEMES[theme]())
    window.show()
    _LOGGER.info("Started with position %r", window.game.position())

    return app.exec()
