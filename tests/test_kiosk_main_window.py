"""Wiring between the Qt window and the controller."""

from __future__ import annotations

import pytest

from kiosk_app.core.models import Screen
from kiosk_app.ui.kiosk_main_window import KioskMainWindow


@pytest.fixture
def window(qtbot, controller):
    kiosk_window = KioskMainWindow(controller)
    qtbot.addWidget(kiosk_window)
    kiosk_window.show()
    return kiosk_window


def test_window_starts_on_idle_panel(window):
    assert window.current_panel() is window.idle_panel


def test_visit_through_the_window(window, controller, scheduler, qtbot):
    window.idle_panel.begin_button.click()
    assert window.current_panel() is window.scan_panel

    scheduler.advance(2000)
    assert window.current_panel() is window.welcome_panel
    assert not window.welcome_panel.continue_button.isEnabled()

    controller.select_school("School of ICT")
    assert window.welcome_panel.continue_button.isEnabled()
    assert window.welcome_panel.school_combo.currentText() == "School of ICT"
    window.welcome_panel.continue_button.click()
    assert window.current_panel() is window.quiz_panel

    assert not window.quiz_panel.submit_button.isEnabled()
    window.quiz_panel.option_buttons[1].click()
    assert window.quiz_panel.selected_option() == "1968"
    assert window.quiz_panel.submit_button.isEnabled()
    window.quiz_panel.submit_button.click()

    assert controller.screen is Screen.RESULT
    assert window.result_panel.outcome_label.text() == "Not Quite!"
    assert window.result_panel.explanation_label.text() == controller.content.quiz.explanation_incorrect

    window.result_panel.continue_button.click()
    assert window.current_panel() is window.reward_panel
    window.reward_panel.end_button.click()
    assert window.current_panel() is window.end_panel
    assert "10" in window.end_panel.countdown_label.text()

    scheduler.advance(10 * 1000)
    assert window.current_panel() is window.idle_panel
    assert controller.session.is_empty


def test_closing_window_shuts_controller_down(window, controller):
    controller.tap_begin()
    window.close()
    assert controller.is_shut_down
    assert controller.session.is_empty
