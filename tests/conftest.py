import os
import random

import pytest

# Qt tests run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class ManualTimer:
    """Timer facility driven by explicit clock advances instead of an event loop."""

    def __init__(self):
        self.now = 0
        self._pending = {}
        self._next_id = 0

    def schedule(self, delay_ms, callback):
        self._next_id += 1
        self._pending[self._next_id] = (self.now + delay_ms, callback)
        return self._next_id

    def cancel(self, handle):
        self._pending.pop(handle, None)

    @property
    def pending(self):
        return len(self._pending)

    def advance(self, ms):
        target = self.now + ms
        while True:
            due = [(at, h) for h, (at, _) in self._pending.items() if at <= target]
            if not due:
                break
            at, handle = min(due)
            self.now = at
            _, callback = self._pending.pop(handle)
            callback()
        self.now = target


@pytest.fixture
def timer():
    return ManualTimer()


@pytest.fixture
def rng():
    return random.Random(1234)
