"""Read-only exhibit content: the school list, the quiz and the reward."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from kiosk_app.constants.kiosk_constants import (
    QUIZ_CORRECT_ANSWER,
    QUIZ_EXPLANATION_CORRECT,
    QUIZ_EXPLANATION_INCORRECT,
    QUIZ_OPTIONS,
    QUIZ_QUESTION,
    QUIZ_TOPIC,
    REWARD_BADGE,
    REWARD_STATUS,
    REWARD_TITLE,
    SCHOOLS,
)


class QuizDefinition(BaseModel):
    """The single multiple-choice question shown to every visitor."""

    model_config = ConfigDict(frozen=True)

    topic: str
    question: str
    options: tuple[str, ...] = Field(min_length=2)
    correct_answer: str
    explanation_correct: str
    explanation_incorrect: str

    @model_validator(mode="after")
    def _check_options(self) -> QuizDefinition:
        if len(set(self.options)) != len(self.options):
            raise ValueError("Quiz options must be unique.")
        if self.correct_answer not in self.options:
            raise ValueError(f"Correct answer {self.correct_answer!r} is not one of the options.")
        return self

    def is_correct(self, answer: str) -> bool:
        return answer == self.correct_answer

    def explanation_for(self, is_correct: bool) -> str:
        return self.explanation_correct if is_correct else self.explanation_incorrect


class KioskContent(BaseModel):
    """Everything the exhibit displays that is not visitor data."""

    model_config = ConfigDict(frozen=True)

    schools: tuple[str, ...] = Field(min_length=1)
    quiz: QuizDefinition
    reward_title: str
    reward_status: str
    reward_badge: str

    @model_validator(mode="after")
    def _check_schools(self) -> KioskContent:
        if len(set(self.schools)) != len(self.schools):
            raise ValueError("School labels must be unique.")
        return self

    def is_known_school(self, value: str | None) -> bool:
        return value in self.schools


def load_default_content() -> KioskContent:
    """Build and validate the exhibit content from the constants module."""
    return KioskContent(
        schools=SCHOOLS,
        quiz=QuizDefinition(
            topic=QUIZ_TOPIC,
            question=QUIZ_QUESTION,
            options=QUIZ_OPTIONS,
            correct_answer=QUIZ_CORRECT_ANSWER,
            explanation_correct=QUIZ_EXPLANATION_CORRECT,
            explanation_incorrect=QUIZ_EXPLANATION_INCORRECT,
        ),
        reward_title=REWARD_TITLE,
        reward_status=REWARD_STATUS,
        reward_badge=REWARD_BADGE,
    )
