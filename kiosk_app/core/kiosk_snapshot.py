"""Immutable observation handed to the presentation layer after each event."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from kiosk_app.core.models import EMPTY_SESSION, Screen, Session


class KioskSnapshot(BaseModel):
    """What the kiosk window may render; it never writes back through this."""

    model_config = ConfigDict(frozen=True)

    screen: Screen = Screen.IDLE
    session: Session = EMPTY_SESSION
    countdown: int | None = None  # Only populated while on the end screen

    @property
    def can_continue(self) -> bool:
        """Whether the welcome screen's continue action is enabled."""
        return self.screen is Screen.WELCOME and self.session.school is not None
