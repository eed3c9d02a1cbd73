# -*- coding: utf-8 -*-

"""
Transient "copy succeeded" flag with timed auto-expiry.

The flag is true from the most recent successful copy until ``duration_ms``
later. A new copy cancels the pending expiry before arming a fresh one, so
windows never stack.
"""

import logging
from typing import Any, Callable, Optional, Protocol

from PySide6.QtCore import QObject, QTimer

from .config import COPY_NOTICE_MS

logger = logging.getLogger(__name__)


class TimerFacility(Protocol):
    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> Any: ...

    def cancel(self, handle: Any) -> None: ...


class QtTimerFacility:
    """Single-shot QTimers driven by the running Qt event loop."""

    def __init__(self, parent: Optional[QObject] = None) -> None:
        self.parent = parent
        # keep live timers referenced until they fire or are cancelled
        self._timers: set[QTimer] = set()

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> QTimer:
        timer = QTimer(self.parent)
        timer.setSingleShot(True)

        def fire() -> None:
            self._timers.discard(timer)
            timer.deleteLater()
            callback()

        timer.timeout.connect(fire)
        self._timers.add(timer)
        timer.start(max(0, int(delay_ms)))
        return timer

    def cancel(self, handle: QTimer) -> None:
        self._timers.discard(handle)
        handle.stop()
        handle.deleteLater()


class ClipboardNotifier:
    def __init__(self, timer: TimerFacility, duration_ms: int = COPY_NOTICE_MS,
                 on_change: Optional[Callable[[], None]] = None) -> None:
        self.timer = timer
        self.duration_ms = duration_ms
        self.on_change = on_change
        self._active = False
        self._pending: Any = None

    @property
    def active(self) -> bool:
        return self._active

    def notify_success(self) -> None:
        self._cancel_pending()
        self._active = True
        self._pending = self.timer.schedule(self.duration_ms, self._expire)
        self._changed()

    def cancel(self) -> None:
        """Drop any pending expiry; the flag keeps its current value."""
        self._cancel_pending()

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self.timer.cancel(self._pending)
            self._pending = None

    def _expire(self) -> None:
        self._pending = None
        self._active = False
        logger.debug("Copy notice expired")
        self._changed()

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()
