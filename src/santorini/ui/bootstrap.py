"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from santorini.config import ClientSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_logging(settings: ClientSettings) -> None:
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _configure_application(app: QApplication, settings: ClientSettings) -> None:
    """Apply app-wide settings and theme."""
    from santorini.ui.i18n import set_language
    from santorini.ui.styles.theme import APP_STYLE

    set_language(settings.language)
    app.setApplicationName("Santorini")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None,
    settings: ClientSettings | None = None,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from santorini.ui.main_window import MainWindow

    settings = settings or ClientSettings.from_env()
    _configure_logging(settings)

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app, settings)
    _LOGGER.info("Connecting to engine at %s", settings.server_url)

    window = MainWindow(settings)
    window.show()

    return app.exec()
