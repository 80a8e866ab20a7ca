"""Cancellable single-shot timers used to drive timed screen transitions."""

from __future__ import annotations

from typing import Callable, Protocol

from PySide6.QtCore import QObject, QTimer


class TimerHandle(Protocol):
    def cancel(self) -> None: ...

    def is_active(self) -> bool: ...


class TimerScheduler(Protocol):
    """Anything that can run a callback once after ``delay_ms`` milliseconds."""

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle: ...


class QtTimerHandle:
    """Handle for a pending ``QTimer`` created by :class:`QtTimerScheduler`."""

    def __init__(self, timer: QTimer, pending: set[QTimer]) -> None:
        self._timer = timer
        self._pending = pending
        self._released = False

    def cancel(self) -> None:
        self.release()

    def is_active(self) -> bool:
        return not self._released and self._timer.isActive()

    def release(self) -> None:
        """Stop the timer and hand it back to Qt for deletion."""
        if self._released:
            return
        self._released = True
        self._timer.stop()
        self._pending.discard(self._timer)
        # Detach first so the parent stops listing it before the deferred delete runs
        self._timer.setParent(None)
        self._timer.deleteLater()


class QtTimerScheduler:
    """Schedules callbacks on the Qt event loop of the calling thread.

    Each timer is released as soon as it fires or is cancelled, so a kiosk
    running for weeks does not accumulate dead timers under ``parent``.
    """

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent
        self._pending: set[QTimer] = set()

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> QtTimerHandle:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.setInterval(delay_ms)
        handle = QtTimerHandle(timer, self._pending)

        def _fire() -> None:
            handle.release()
            callback()

        timer.timeout.connect(_fire)
        self._pending.add(timer)
        timer.start()
        return handle

    def pending_count(self) -> int:
        return len(self._pending)
