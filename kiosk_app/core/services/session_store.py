"""In-memory store for the single active visitor session."""

from __future__ import annotations

import logging
from uuid import uuid4

from kiosk_app.constants.kiosk_constants import SESSION_TOKEN_PREFIX
from kiosk_app.core.content import QuizDefinition
from kiosk_app.core.models import EMPTY_SESSION, Session

logger = logging.getLogger(__name__)


class SessionMisuseError(RuntimeError):
    """Raised in strict mode when a mutation arrives with no active session."""


class SessionStore:
    """Holds at most one visit record and never lets it leave process memory.

    All four fields live together in one immutable ``Session`` value, so a
    clear always resets them at once.
    """

    def __init__(self, quiz: QuizDefinition, *, strict: bool = False) -> None:
        self._quiz = quiz
        self._strict = strict
        self._session: Session = EMPTY_SESSION

    def begin(self) -> str:
        """Discard any prior visit and start a new one with a fresh token."""
        token = f"{SESSION_TOKEN_PREFIX}{uuid4().hex}"
        self._session = Session(token=token)
        return token

    def set_school(self, value: str) -> None:
        if not self._require_active("set_school"):
            return
        self._session = Session(
            token=self._session.token,
            school=value,
            quiz_answer=self._session.quiz_answer,
            is_correct=self._session.is_correct,
        )

    def record_answer(self, value: str) -> bool | None:
        """Store the answer and its correctness together; return the correctness."""
        if not self._require_active("record_answer"):
            return None
        is_correct = self._quiz.is_correct(value)
        self._session = Session(
            token=self._session.token,
            school=self._session.school,
            quiz_answer=value,
            is_correct=is_correct,
        )
        return is_correct

    def clear(self) -> None:
        self._session = EMPTY_SESSION

    def current(self) -> Session:
        return self._session

    def has_active_session(self) -> bool:
        return self._session.token is not None

    def _require_active(self, operation: str) -> bool:
        if self.has_active_session():
            return True
        if self._strict:
            raise SessionMisuseError(f"{operation} called with no active session.")
        logger.warning("Ignoring %s: no active session.", operation)
        return False
