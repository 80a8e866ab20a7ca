"""Shared fixtures for the kiosk test-suite."""

from __future__ import annotations

import os
from typing import Callable, Iterator

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from kiosk_app.core.content import KioskContent, load_default_content  # noqa: E402
from kiosk_app.core.kiosk_controller import KioskController  # noqa: E402
from kiosk_app.core.services.session_store import SessionStore  # noqa: E402


class FakeTimer:
    def __init__(self, due_ms: int, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self.callback = callback
        self._active = True

    def cancel(self) -> None:
        self._active = False

    def is_active(self) -> bool:
        return self._active


class FakeScheduler:
    """Manual clock: timers only fire when the test advances time."""

    def __init__(self) -> None:
        self.now_ms = 0
        self.fired = 0
        self._timers: list[FakeTimer] = []

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(self.now_ms + delay_ms, callback)
        self._timers.append(timer)
        return timer

    def pending(self) -> list[FakeTimer]:
        return [timer for timer in self._timers if timer.is_active()]

    def advance(self, ms: int) -> None:
        target = self.now_ms + ms
        while True:
            due = [timer for timer in self.pending() if timer.due_ms <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.due_ms)
            self.now_ms = timer.due_ms
            timer.cancel()
            self.fired += 1
            timer.callback()
        self.now_ms = target


@pytest.fixture
def content() -> KioskContent:
    return load_default_content()


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def controller(content: KioskContent, scheduler: FakeScheduler) -> Iterator[KioskController]:
    kiosk = KioskController(content, scheduler, strict=True)
    yield kiosk
    kiosk.shutdown()


@pytest.fixture
def store(content: KioskContent) -> SessionStore:
    return SessionStore(content.quiz, strict=True)
