# -*- coding: utf-8 -*-

"""
Generator session: owns the configuration, the current result, the rolling
history and the copy notice, and exposes the intents a renderer may issue.

Every intent runs to completion synchronously. The only deferred transition
is the copy notice expiring, which is driven by the notifier's timer.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union

from .core import (
    CharClass,
    Configuration,
    EmptyAlphabetError,
    StringSampler,
    build_alphabet,
    estimate_entropy_bits,
)
from .history import HistoryLog
from .notifier import ClipboardNotifier, QtTimerFacility, TimerFacility

logger = logging.getLogger(__name__)


class EmptyAlphabetNotice:
    """Result marker for a generation with no character class selected."""

    message = "Please select at least one character type"

    def __repr__(self) -> str:
        return "EMPTY_ALPHABET_NOTICE"

    def __str__(self) -> str:
        return self.message


EMPTY_ALPHABET_NOTICE = EmptyAlphabetNotice()

GeneratedResult = Union[str, EmptyAlphabetNotice]


@dataclass(frozen=True)
class SessionSnapshot:
    config: Configuration
    current: Optional[GeneratedResult]
    copied: bool
    history: Tuple[str, ...]
    entropy_bits: float

    @property
    def is_notice(self) -> bool:
        return isinstance(self.current, EmptyAlphabetNotice)

    @property
    def display_text(self) -> str:
        return "" if self.current is None else str(self.current)


class GeneratorSession:
    def __init__(self,
                 sampler: Optional[StringSampler] = None,
                 timer: Optional[TimerFacility] = None,
                 clipboard: Optional[Callable[[str], None]] = None,
                 on_change: Optional[Callable[[], None]] = None,
                 config: Optional[Configuration] = None) -> None:
        self.sampler = sampler if sampler is not None else StringSampler()
        self.clipboard = clipboard
        self.history = HistoryLog()
        self.notifier = ClipboardNotifier(timer if timer is not None else QtTimerFacility(),
                                          on_change=self._changed)
        self._config = config if config is not None else Configuration()
        self._current: Optional[GeneratedResult] = None

        # listener is attached after the first result exists
        self.on_change: Optional[Callable[[], None]] = None
        self.generate()
        self.on_change = on_change

    # ---------- read-only state ----------

    @property
    def config(self) -> Configuration:
        return self._config

    @property
    def current(self) -> Optional[GeneratedResult]:
        return self._current

    @property
    def is_notice(self) -> bool:
        return isinstance(self._current, EmptyAlphabetNotice)

    @property
    def copied(self) -> bool:
        return self.notifier.active

    def snapshot(self) -> SessionSnapshot:
        alphabet = build_alphabet(self._config)
        return SessionSnapshot(
            config=self._config,
            current=self._current,
            copied=self.notifier.active,
            history=self.history.snapshot(),
            entropy_bits=estimate_entropy_bits(self._config.length, len(alphabet)),
        )

    # ---------- intents ----------

    def set_length(self, n: int) -> None:
        self._config = self._config.with_length(n)
        self._changed()

    def set_class_toggle(self, char_class: CharClass, enabled: bool) -> None:
        self._config = self._config.with_class(char_class, enabled)
        self._changed()

    def generate(self) -> GeneratedResult:
        alphabet = build_alphabet(self._config)
        try:
            result = self.sampler.sample(alphabet, self._config.length)
        except EmptyAlphabetError:
            logger.debug("No character class selected; showing notice")
            self._current = EMPTY_ALPHABET_NOTICE
        else:
            logger.debug("Generated %d chars from a %d-char alphabet", len(result), len(alphabet))
            self._current = result
            self.history.push(result)
        self._changed()
        return self._current

    def copy_current(self) -> bool:
        current = self._current
        if not isinstance(current, str) or not current:
            return False
        if self.clipboard is not None:
            try:
                self.clipboard(current)
            except Exception:
                # the notice fires regardless of what the platform clipboard does
                logger.warning("Clipboard write failed", exc_info=True)
        self.notifier.notify_success()
        return True

    def clear_history(self) -> None:
        self.history.clear()
        logger.debug("History cleared")
        self._changed()

    def close(self) -> None:
        self.notifier.cancel()

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()
