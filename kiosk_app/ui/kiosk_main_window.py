"""Qt main window rendering one panel per kiosk screen."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from kiosk_app.constants.ui_constants import PRIVACY_BUTTON, WINDOW_TITLE
from kiosk_app.core.kiosk_controller import KioskController
from kiosk_app.core.kiosk_snapshot import KioskSnapshot
from kiosk_app.core.models import Screen
from kiosk_app.styling.styles import Styles
from kiosk_app.ui.components.intro_panels import IdlePanel, ScanPanel
from kiosk_app.ui.components.outcome_panels import EndPanel, ResultPanel, RewardPanel
from kiosk_app.ui.components.quiz_panel import QuizPanel
from kiosk_app.ui.components.welcome_panel import WelcomePanel
from kiosk_app.ui.dialog_helpers import show_privacy_notice


class KioskMainWindow(QMainWindow):
    """Reactive view over a :class:`KioskController`.

    The window only reads snapshots; every visitor action goes back through
    the controller's event methods.
    """

    def __init__(self, controller: KioskController) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.controller = controller

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())

        self.controller.add_listener(self.render_snapshot)
        self.render_snapshot(self.controller.snapshot())

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.screen_stack = QStackedWidget(self)

        self.idle_panel = IdlePanel(self.controller, self)
        self.scan_panel = ScanPanel(self)
        self.welcome_panel = WelcomePanel(self.controller, self)
        self.quiz_panel = QuizPanel(self.controller, self)
        self.result_panel = ResultPanel(self.controller, self)
        self.reward_panel = RewardPanel(self.controller, self)
        self.end_panel = EndPanel(self)

        self._panels = {
            Screen.IDLE: self.idle_panel,
            Screen.SCAN: self.scan_panel,
            Screen.WELCOME: self.welcome_panel,
            Screen.QUIZ: self.quiz_panel,
            Screen.RESULT: self.result_panel,
            Screen.REWARD: self.reward_panel,
            Screen.END: self.end_panel,
        }
        for panel in self._panels.values():
            self.screen_stack.addWidget(panel)

        root_layout.addWidget(self.screen_stack, stretch=1)

        footer_row = QHBoxLayout()
        footer_row.addStretch()
        self.privacy_button = QPushButton(PRIVACY_BUTTON, self)
        self.privacy_button.setFocusPolicy(Qt.NoFocus)
        self.privacy_button.clicked.connect(self._handle_privacy)
        footer_row.addWidget(self.privacy_button)
        root_layout.addLayout(footer_row)

    def current_panel(self) -> QWidget:
        return self.screen_stack.currentWidget()

    def render_snapshot(self, snapshot: KioskSnapshot) -> None:
        panel = self._panels[snapshot.screen]
        panel.render_snapshot(snapshot)
        self.screen_stack.setCurrentWidget(panel)

    def _handle_privacy(self) -> None:
        show_privacy_notice(self)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.controller.remove_listener(self.render_snapshot)
        self.controller.shutdown()
        super().closeEvent(event)
