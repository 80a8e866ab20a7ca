"""Panels shown after the answer: result, reward and the closing countdown."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QLabel, QPushButton, QVBoxLayout, QWidget

from kiosk_app.constants.ui_constants import (
    END_COUNTDOWN_TEMPLATE,
    END_NOTICE,
    END_TITLE,
    RESULT_CONTINUE_BUTTON,
    RESULT_CORRECT_TITLE,
    RESULT_INCORRECT_TITLE,
    REWARD_BADGE_CAPTION,
    REWARD_END_BUTTON,
    REWARD_HEADLINE,
    REWARD_SUBTITLE,
)
from kiosk_app.core.kiosk_controller import KioskController
from kiosk_app.core.kiosk_snapshot import KioskSnapshot
from kiosk_app.styling.styles import Styles


def _centered_label(text: str, parent: QWidget, style: str | None = None) -> QLabel:
    label = QLabel(text, parent)
    label.setAlignment(Qt.AlignCenter)
    label.setWordWrap(True)
    if style:
        label.setStyleSheet(style)
    return label


class ResultPanel(QWidget):
    """Tells the visitor whether the answer was right and explains it."""

    def __init__(self, controller: KioskController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller

        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.outcome_label = _centered_label("", self)
        layout.addWidget(self.outcome_label)

        self.explanation_label = _centered_label("", self, Styles.get_subtitle_style())
        layout.addWidget(self.explanation_label)

        self.continue_button = QPushButton(RESULT_CONTINUE_BUTTON, self)
        self.continue_button.setStyleSheet(Styles.get_primary_button_style())
        self.continue_button.clicked.connect(self.controller.confirm_continue)
        layout.addWidget(self.continue_button, alignment=Qt.AlignCenter)

    def render_snapshot(self, snapshot: KioskSnapshot) -> None:
        is_correct = bool(snapshot.session.is_correct)
        self.outcome_label.setText(RESULT_CORRECT_TITLE if is_correct else RESULT_INCORRECT_TITLE)
        self.outcome_label.setStyleSheet(Styles.get_outcome_style(is_correct))
        self.explanation_label.setText(self.controller.content.quiz.explanation_for(is_correct))


class RewardPanel(QWidget):
    """Participation reward, unlocked whatever the quiz outcome."""

    def __init__(self, controller: KioskController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        content = controller.content

        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        layout.addWidget(_centered_label(REWARD_HEADLINE, self, Styles.get_title_style()))
        layout.addWidget(_centered_label(REWARD_SUBTITLE, self, Styles.get_subtitle_style()))

        card = QFrame(self)
        card_layout = QVBoxLayout()
        card.setLayout(card_layout)
        self.reward_label = _centered_label(
            f"{content.reward_title}\n{content.reward_status}", card, "font-size: 22pt; font-weight: bold;"
        )
        card_layout.addWidget(self.reward_label)
        card_layout.addWidget(_centered_label(REWARD_BADGE_CAPTION, card, Styles.get_subtitle_style()))
        self.badge_label = _centered_label(content.reward_badge, card, Styles.get_badge_style())
        card_layout.addWidget(self.badge_label)
        layout.addWidget(card)

        self.end_button = QPushButton(REWARD_END_BUTTON, self)
        self.end_button.setStyleSheet(Styles.get_primary_button_style())
        self.end_button.clicked.connect(self.controller.confirm_end)
        layout.addWidget(self.end_button, alignment=Qt.AlignCenter)

    def render_snapshot(self, snapshot: KioskSnapshot) -> None:
        pass


class EndPanel(QWidget):
    """Closing screen counting down to the next visitor."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        layout.addWidget(_centered_label(END_TITLE, self, Styles.get_title_style()))
        layout.addWidget(_centered_label(END_NOTICE, self, Styles.get_subtitle_style()))
        self.countdown_label = _centered_label("", self)
        layout.addWidget(self.countdown_label)

    def render_snapshot(self, snapshot: KioskSnapshot) -> None:
        if snapshot.countdown is None:
            self.countdown_label.clear()
            return
        self.countdown_label.setText(END_COUNTDOWN_TEMPLATE.format(seconds=snapshot.countdown))
