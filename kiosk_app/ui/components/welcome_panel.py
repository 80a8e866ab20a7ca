"""Component for the welcome screen where the visitor picks a school."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QComboBox, QLabel, QPushButton, QVBoxLayout, QWidget

from kiosk_app.constants.ui_constants import (
    WELCOME_CONTINUE_BUTTON,
    WELCOME_PLACEHOLDER,
    WELCOME_PROMPT,
    WELCOME_TITLE,
)
from kiosk_app.core.kiosk_controller import KioskController
from kiosk_app.core.kiosk_snapshot import KioskSnapshot
from kiosk_app.styling.styles import Styles


class WelcomePanel(QWidget):
    """School selection; the school may be changed until the quiz starts."""

    def __init__(self, controller: KioskController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.title_label = QLabel(WELCOME_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_title_style())
        layout.addWidget(self.title_label)

        self.school_label = QLabel("", self)
        self.school_label.setAlignment(Qt.AlignCenter)
        self.school_label.setVisible(False)
        layout.addWidget(self.school_label)

        self.prompt_label = QLabel(WELCOME_PROMPT, self)
        self.prompt_label.setStyleSheet(Styles.get_subtitle_style())
        layout.addWidget(self.prompt_label)

        self.school_combo = QComboBox(self)
        self.school_combo.addItems(list(self.controller.content.schools))
        self.school_combo.setPlaceholderText(WELCOME_PLACEHOLDER)
        self.school_combo.setCurrentIndex(-1)
        # activated is only emitted for user interaction, never for programmatic resets
        self.school_combo.activated.connect(self._handle_school_activated)
        layout.addWidget(self.school_combo)

        self.continue_button = QPushButton(WELCOME_CONTINUE_BUTTON, self)
        self.continue_button.setStyleSheet(Styles.get_primary_button_style())
        self.continue_button.setEnabled(False)
        self.continue_button.clicked.connect(self.controller.confirm_continue)
        layout.addWidget(self.continue_button, alignment=Qt.AlignCenter)

    def _handle_school_activated(self, index: int) -> None:
        if index < 0:
            return
        self.controller.select_school(self.school_combo.itemText(index))

    def render_snapshot(self, snapshot: KioskSnapshot) -> None:
        school = snapshot.session.school
        if school is None:
            self.school_combo.setCurrentIndex(-1)
            self.school_label.setVisible(False)
        else:
            self.school_combo.setCurrentIndex(self.school_combo.findText(school))
            self.school_label.setText(school)
            self.school_label.setVisible(True)
        self.continue_button.setEnabled(snapshot.can_continue)
