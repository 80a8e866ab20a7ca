"""Validation of the static exhibit content."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from kiosk_app.core.content import KioskContent, QuizDefinition


def _quiz(**overrides) -> QuizDefinition:
    fields = dict(
        topic="NP History",
        question="In what year was Ngee Ann Polytechnic established?",
        options=("1963", "1968"),
        correct_answer="1963",
        explanation_correct="Yes",
        explanation_incorrect="No",
    )
    fields.update(overrides)
    return QuizDefinition(**fields)


def test_default_content_matches_exhibit(content):
    assert "School of ICT" in content.schools
    assert len(content.schools) == 7
    assert content.quiz.options == ("1963", "1968", "1982", "1975")
    assert content.quiz.correct_answer == "1963"
    assert content.reward_badge == "History Explorer"


def test_explanation_follows_outcome(content):
    assert content.quiz.explanation_for(True) == content.quiz.explanation_correct
    assert content.quiz.explanation_for(False) == content.quiz.explanation_incorrect


def test_correct_answer_must_be_an_option():
    with pytest.raises(ValidationError):
        _quiz(correct_answer="2001")


def test_options_must_be_unique():
    with pytest.raises(ValidationError):
        _quiz(options=("1963", "1963"))


def test_schools_must_be_unique():
    with pytest.raises(ValidationError):
        KioskContent(
            schools=("School of ICT", "School of ICT"),
            quiz=_quiz(),
            reward_title="Memory Photobooth",
            reward_status="Unlocked!",
            reward_badge="History Explorer",
        )


def test_content_is_immutable(content):
    with pytest.raises(ValidationError):
        content.quiz.correct_answer = "1968"
