"""Screen state machine for the kiosk visit flow."""

from __future__ import annotations

import logging
from threading import Lock
from typing import Callable

from kiosk_app.constants.kiosk_constants import (
    COUNTDOWN_START,
    COUNTDOWN_TICK_MS,
    SCAN_DELAY_MS,
    STRICT_SESSION_CHECKS,
)
from kiosk_app.core.content import KioskContent
from kiosk_app.core.kiosk_snapshot import KioskSnapshot
from kiosk_app.core.models import KioskEvent, KioskEventType, Screen, Session
from kiosk_app.core.services.session_store import SessionStore
from kiosk_app.core.services.timer_scheduler import TimerHandle, TimerScheduler

logger = logging.getLogger(__name__)

Listener = Callable[[KioskSnapshot], None]

TIMER_EVENTS = frozenset({KioskEventType.SCAN_COMPLETE, KioskEventType.COUNTDOWN_TICK})

# A timer only acts if the screen and visit it was scheduled for are still current.
_TimerGuard = tuple[Screen, str | None]


class KioskController:
    """Owns the active screen, the countdown and the timers of one kiosk.

    Events are applied one at a time. An event with no transition from the
    current screen is dropped without side effects.
    """

    def __init__(
        self,
        content: KioskContent,
        scheduler: TimerScheduler,
        *,
        store: SessionStore | None = None,
        scan_delay_ms: int = SCAN_DELAY_MS,
        countdown_start: int = COUNTDOWN_START,
        countdown_tick_ms: int = COUNTDOWN_TICK_MS,
        strict: bool = STRICT_SESSION_CHECKS,
    ) -> None:
        self._lock = Lock()
        self._content = content
        self._scheduler = scheduler
        self._store = store or SessionStore(content.quiz, strict=strict)

        self._scan_delay_ms = scan_delay_ms
        self._countdown_start = countdown_start
        self._countdown_tick_ms = countdown_tick_ms

        self._screen: Screen = Screen.IDLE
        self._countdown: int = countdown_start
        self._scan_timer: TimerHandle | None = None
        self._countdown_timer: TimerHandle | None = None
        self._listeners: list[Listener] = []
        self._shut_down: bool = False

        self._transitions: dict[tuple[Screen, KioskEventType], Callable[[KioskEvent], bool]] = {
            (Screen.IDLE, KioskEventType.TAP_BEGIN): self._on_tap_begin,
            (Screen.SCAN, KioskEventType.SCAN_COMPLETE): self._on_scan_complete,
            (Screen.WELCOME, KioskEventType.SELECT_SCHOOL): self._on_select_school,
            (Screen.WELCOME, KioskEventType.CONFIRM_CONTINUE): self._on_confirm_school,
            (Screen.QUIZ, KioskEventType.SUBMIT_ANSWER): self._on_submit_answer,
            (Screen.RESULT, KioskEventType.CONFIRM_CONTINUE): self._on_confirm_result,
            (Screen.REWARD, KioskEventType.CONFIRM_END): self._on_confirm_end,
            (Screen.END, KioskEventType.COUNTDOWN_TICK): self._on_countdown_tick,
        }

    # --- Observation ---

    @property
    def content(self) -> KioskContent:
        return self._content

    @property
    def screen(self) -> Screen:
        with self._lock:
            return self._screen

    @property
    def session(self) -> Session:
        with self._lock:
            return self._store.current()

    @property
    def is_shut_down(self) -> bool:
        with self._lock:
            return self._shut_down

    def snapshot(self) -> KioskSnapshot:
        with self._lock:
            return self._snapshot_locked()

    def add_listener(self, listener: Listener) -> None:
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    # --- Inbound events ---

    def dispatch(self, event: KioskEvent) -> bool:
        """Apply a visitor event. Returns True if it caused a transition."""
        if event.type in TIMER_EVENTS:
            logger.debug("Ignoring externally dispatched timer event %s.", event.type.value)
            return False
        return self._process(event, guard=None)

    def tap_begin(self) -> bool:
        return self.dispatch(KioskEvent(KioskEventType.TAP_BEGIN))

    def select_school(self, school: str) -> bool:
        return self.dispatch(KioskEvent(KioskEventType.SELECT_SCHOOL, school))

    def confirm_continue(self) -> bool:
        return self.dispatch(KioskEvent(KioskEventType.CONFIRM_CONTINUE))

    def submit_answer(self, answer: str) -> bool:
        return self.dispatch(KioskEvent(KioskEventType.SUBMIT_ANSWER, answer))

    def confirm_end(self) -> bool:
        return self.dispatch(KioskEvent(KioskEventType.CONFIRM_END))

    # --- Lifecycle ---

    def shutdown(self) -> None:
        """Cancel outstanding timers, drop any visit data and rest on idle."""
        with self._lock:
            if self._shut_down:
                return
            self._cancel_scan_timer()
            self._cancel_countdown_timer()
            self._store.clear()
            self._screen = Screen.IDLE
            self._countdown = self._countdown_start
            self._listeners.clear()
            self._shut_down = True
        logger.info("Kiosk controller shut down.")

    # --- Internals ---

    def _process(self, event: KioskEvent, guard: _TimerGuard | None) -> bool:
        with self._lock:
            if self._shut_down:
                logger.debug("Ignoring %s after shutdown.", event.type.value)
                return False
            if guard is not None and guard != (self._screen, self._store.current().token):
                logger.debug("Discarding stale %s timer.", event.type.value)
                return False
            handler = self._transitions.get((self._screen, event.type))
            if handler is None:
                logger.debug("Ignoring %s on %s screen.", event.type.value, self._screen.value)
                return False

            previous = self._screen
            if not handler(event):
                logger.debug("Rejected %s on %s screen.", event.type.value, previous.value)
                return False
            if previous is not self._screen:
                logger.info("Screen %s -> %s", previous.value, self._screen.value)
            snapshot = self._snapshot_locked()
            listeners = list(self._listeners)

        self._notify(listeners, snapshot)
        return True

    def _notify(self, listeners: list[Listener], snapshot: KioskSnapshot) -> None:
        for listener in listeners:
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Kiosk listener %r failed", listener)

    def _snapshot_locked(self) -> KioskSnapshot:
        return KioskSnapshot(
            screen=self._screen,
            session=self._store.current(),
            countdown=self._countdown if self._screen is Screen.END else None,
        )

    def _enter(self, screen: Screen) -> None:
        if self._screen is Screen.SCAN and screen is not Screen.SCAN:
            self._cancel_scan_timer()
        if self._screen is Screen.END and screen is not Screen.END:
            self._cancel_countdown_timer()
        self._screen = screen

    def _schedule(self, delay_ms: int, event_type: KioskEventType) -> TimerHandle:
        guard: _TimerGuard = (self._screen, self._store.current().token)

        def _fire() -> None:
            self._process(KioskEvent(event_type), guard=guard)

        return self._scheduler.schedule(delay_ms, _fire)

    def _cancel_scan_timer(self) -> None:
        if self._scan_timer is not None:
            self._scan_timer.cancel()
            self._scan_timer = None

    def _cancel_countdown_timer(self) -> None:
        if self._countdown_timer is not None:
            self._countdown_timer.cancel()
            self._countdown_timer = None

    # --- Transition handlers (called with the lock held) ---

    def _on_tap_begin(self, event: KioskEvent) -> bool:
        self._store.begin()
        self._enter(Screen.SCAN)
        self._scan_timer = self._schedule(self._scan_delay_ms, KioskEventType.SCAN_COMPLETE)
        logger.info("Visit started.")
        return True

    def _on_scan_complete(self, event: KioskEvent) -> bool:
        self._scan_timer = None
        self._enter(Screen.WELCOME)
        return True

    def _on_select_school(self, event: KioskEvent) -> bool:
        if not self._content.is_known_school(event.value):
            return False
        self._store.set_school(event.value)
        return True

    def _on_confirm_school(self, event: KioskEvent) -> bool:
        if self._store.current().school is None:
            return False
        self._enter(Screen.QUIZ)
        return True

    def _on_submit_answer(self, event: KioskEvent) -> bool:
        if event.value not in self._content.quiz.options:
            return False
        self._store.record_answer(event.value)
        self._enter(Screen.RESULT)
        return True

    def _on_confirm_result(self, event: KioskEvent) -> bool:
        self._enter(Screen.REWARD)
        return True

    def _on_confirm_end(self, event: KioskEvent) -> bool:
        self._countdown = self._countdown_start
        self._enter(Screen.END)
        self._countdown_timer = self._schedule(self._countdown_tick_ms, KioskEventType.COUNTDOWN_TICK)
        return True

    def _on_countdown_tick(self, event: KioskEvent) -> bool:
        self._countdown_timer = None
        self._countdown -= 1
        if self._countdown > 0:
            self._countdown_timer = self._schedule(self._countdown_tick_ms, KioskEventType.COUNTDOWN_TICK)
            return True

        self._store.clear()
        self._countdown = self._countdown_start
        self._enter(Screen.IDLE)
        logger.info("Visit ended; session data cleared.")
        return True
