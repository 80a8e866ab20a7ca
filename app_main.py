"""Application entry point for the Memory Trail kiosk."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from kiosk_app.constants.ui_constants import KIOSK_FULLSCREEN
from kiosk_app.core.content import load_default_content
from kiosk_app.core.kiosk_controller import KioskController
from kiosk_app.core.services.timer_scheduler import QtTimerScheduler
from kiosk_app.ui.kiosk_main_window import KioskMainWindow
from kiosk_app.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, build the controller, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting Memory Trail kiosk…")

    content = load_default_content()

    app = QApplication(sys.argv)
    controller = KioskController(content, QtTimerScheduler(app))
    app.aboutToQuit.connect(controller.shutdown)

    window = KioskMainWindow(controller)
    if KIOSK_FULLSCREEN:
        window.showFullScreen()
    else:
        window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
