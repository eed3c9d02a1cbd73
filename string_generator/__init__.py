# -*- coding: utf-8 -*-

"""Random string generator: configurable alphabet, rolling history, copy notice."""

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
from .session import EMPTY_ALPHABET_NOTICE, EmptyAlphabetNotice, GeneratorSession, SessionSnapshot

__all__ = [
    "CharClass",
    "ClipboardNotifier",
    "Configuration",
    "EMPTY_ALPHABET_NOTICE",
    "EmptyAlphabetError",
    "EmptyAlphabetNotice",
    "GeneratorSession",
    "HistoryLog",
    "QtTimerFacility",
    "SessionSnapshot",
    "StringSampler",
    "TimerFacility",
    "build_alphabet",
    "estimate_entropy_bits",
]
