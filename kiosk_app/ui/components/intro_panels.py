"""Panels for the idle attract screen and the simulated card scan."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from kiosk_app.constants.about import APP_NAME, APP_TAGLINE
from kiosk_app.constants.ui_constants import (
    IDLE_BEGIN_BUTTON,
    IDLE_PRIVACY_LINE,
    SCAN_PRIVACY_LINE,
    SCAN_TITLE,
)
from kiosk_app.core.kiosk_controller import KioskController
from kiosk_app.core.kiosk_snapshot import KioskSnapshot
from kiosk_app.styling.styles import Styles


class IdlePanel(QWidget):
    """Attract screen shown between visits."""

    def __init__(self, controller: KioskController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.title_label = QLabel(APP_NAME, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_title_style())
        layout.addWidget(self.title_label)

        self.tagline_label = QLabel(APP_TAGLINE, self)
        self.tagline_label.setAlignment(Qt.AlignCenter)
        self.tagline_label.setStyleSheet(Styles.get_subtitle_style())
        layout.addWidget(self.tagline_label)

        self.begin_button = QPushButton(IDLE_BEGIN_BUTTON, self)
        self.begin_button.setStyleSheet(Styles.get_primary_button_style())
        self.begin_button.clicked.connect(self.controller.tap_begin)
        layout.addWidget(self.begin_button, alignment=Qt.AlignCenter)

        self.privacy_label = QLabel(IDLE_PRIVACY_LINE, self)
        self.privacy_label.setAlignment(Qt.AlignCenter)
        self.privacy_label.setStyleSheet(Styles.get_subtitle_style())
        layout.addWidget(self.privacy_label)

    def render_snapshot(self, snapshot: KioskSnapshot) -> None:
        pass


class ScanPanel(QWidget):
    """Shown while the card read is simulated."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.title_label = QLabel(SCAN_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_title_style())
        layout.addWidget(self.title_label)

        self.privacy_label = QLabel(SCAN_PRIVACY_LINE, self)
        self.privacy_label.setAlignment(Qt.AlignCenter)
        self.privacy_label.setStyleSheet(Styles.get_subtitle_style())
        layout.addWidget(self.privacy_label)

    def render_snapshot(self, snapshot: KioskSnapshot) -> None:
        pass
