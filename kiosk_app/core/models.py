"""Domain models for the kiosk visit flow."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Screen(str, Enum):
    """Presentation states in visit order."""

    IDLE = "idle"
    SCAN = "scan"
    WELCOME = "welcome"
    QUIZ = "quiz"
    RESULT = "result"
    REWARD = "reward"
    END = "end"


class KioskEventType(str, Enum):
    """Inbound events accepted by the controller."""

    TAP_BEGIN = "tap_begin"
    SELECT_SCHOOL = "select_school"
    CONFIRM_CONTINUE = "confirm_continue"
    SUBMIT_ANSWER = "submit_answer"
    CONFIRM_END = "confirm_end"
    # Timer-driven
    SCAN_COMPLETE = "scan_complete"
    COUNTDOWN_TICK = "countdown_tick"


@dataclass(frozen=True, slots=True)
class KioskEvent:
    """An event plus its optional payload (school or option label)."""

    type: KioskEventType
    value: str | None = None


@dataclass(frozen=True, slots=True)
class Session:
    """Read-only view of the ephemeral per-visit record."""

    token: str | None = None
    school: str | None = None
    quiz_answer: str | None = None
    is_correct: bool | None = None

    @property
    def is_empty(self) -> bool:
        return (
            self.token is None
            and self.school is None
            and self.quiz_answer is None
            and self.is_correct is None
        )


EMPTY_SESSION = Session()
