"""Component for the single-question quiz screen."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QButtonGroup,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from kiosk_app.constants.ui_constants import QUIZ_PROGRESS_TEMPLATE, QUIZ_SUBMIT_BUTTON
from kiosk_app.core.kiosk_controller import KioskController
from kiosk_app.core.kiosk_snapshot import KioskSnapshot
from kiosk_app.styling.styles import Styles


class QuizPanel(QWidget):
    """Shows the question; an option is picked locally, then submitted once."""

    def __init__(self, controller: KioskController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self._selected: str | None = None
        self._build_ui()

    def _build_ui(self) -> None:
        quiz = self.controller.content.quiz
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.progress_label = QLabel(QUIZ_PROGRESS_TEMPLATE.format(number=1, total=1), self)
        self.progress_label.setStyleSheet(Styles.get_subtitle_style())
        header_row.addWidget(self.progress_label)
        header_row.addStretch()
        self.topic_label = QLabel(quiz.topic, self)
        header_row.addWidget(self.topic_label)
        layout.addLayout(header_row)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setValue(50)
        self.progress_bar.setTextVisible(False)
        layout.addWidget(self.progress_bar)

        self.question_label = QLabel(quiz.question, self)
        self.question_label.setWordWrap(True)
        self.question_label.setAlignment(Qt.AlignCenter)
        self.question_label.setStyleSheet("font-size: 28pt; font-weight: bold;")
        layout.addWidget(self.question_label, stretch=1)

        options_grid = QGridLayout()
        self.option_group = QButtonGroup(self)
        self.option_group.setExclusive(True)
        self.option_buttons: list[QPushButton] = []
        for idx, option in enumerate(quiz.options):
            button = QPushButton(option, self)
            button.setCheckable(True)
            button.clicked.connect(lambda _checked=False, value=option: self._handle_option_clicked(value))
            self.option_group.addButton(button, idx)
            self.option_buttons.append(button)
            options_grid.addWidget(button, idx // 2, idx % 2)
        layout.addLayout(options_grid)

        self.submit_button = QPushButton(QUIZ_SUBMIT_BUTTON, self)
        self.submit_button.setStyleSheet(Styles.get_primary_button_style())
        self.submit_button.setEnabled(False)
        self.submit_button.clicked.connect(self._handle_submit)
        layout.addWidget(self.submit_button, alignment=Qt.AlignCenter)

    def _handle_option_clicked(self, value: str) -> None:
        self._selected = value
        self.submit_button.setEnabled(True)

    def _handle_submit(self) -> None:
        if self._selected is None:
            return
        self.controller.submit_answer(self._selected)

    def selected_option(self) -> str | None:
        return self._selected

    def reset_state(self) -> None:
        self._selected = None
        # Unchecking inside an exclusive group is ignored, so lift exclusivity briefly
        self.option_group.setExclusive(False)
        for button in self.option_buttons:
            button.setChecked(False)
        self.option_group.setExclusive(True)
        self.submit_button.setEnabled(False)

    def render_snapshot(self, snapshot: KioskSnapshot) -> None:
        self.reset_state()
