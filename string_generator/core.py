# -*- coding: utf-8 -*-

"""
Core helpers for random string generation
- Four fixed, disjoint character classes
- Alphabet built from the enabled classes in a fixed order
- Uniform sampling with replacement from an injectable random source
- Entropy estimate for the current configuration
"""

import enum
import logging
import math
import random
import string
from dataclasses import dataclass, replace

from .config import DEFAULT_LENGTH, MAX_LENGTH, MIN_LENGTH

logger = logging.getLogger(__name__)

# ---------------- Character classes ----------------

SYMBOL_CHARS = "!@#$%^&*()_+-=[]{}|;:,.<>?"


class CharClass(enum.Enum):
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    NUMBERS = "numbers"
    SYMBOLS = "symbols"

    @property
    def chars(self) -> str:
        return _CLASS_CHARS[self]


_CLASS_CHARS = {
    CharClass.UPPERCASE: string.ascii_uppercase,
    CharClass.LOWERCASE: string.ascii_lowercase,
    CharClass.NUMBERS: string.digits,
    CharClass.SYMBOLS: SYMBOL_CHARS,
}

# alphabet concatenation order
CLASS_ORDER = (CharClass.UPPERCASE, CharClass.LOWERCASE, CharClass.NUMBERS, CharClass.SYMBOLS)


def clamp_length(n: int) -> int:
    return max(MIN_LENGTH, min(int(n), MAX_LENGTH))


# ---------------- Configuration ----------------

@dataclass(frozen=True)
class Configuration:
    length: int = DEFAULT_LENGTH
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = False

    def __post_init__(self) -> None:
        # frozen, so write through object.__setattr__
        object.__setattr__(self, "length", clamp_length(self.length))

    def is_enabled(self, char_class: CharClass) -> bool:
        return getattr(self, _TOGGLE_FIELDS[char_class])

    def with_length(self, n: int) -> "Configuration":
        return replace(self, length=n)

    def with_class(self, char_class: CharClass, enabled: bool) -> "Configuration":
        return replace(self, **{_TOGGLE_FIELDS[char_class]: bool(enabled)})


_TOGGLE_FIELDS = {
    CharClass.UPPERCASE: "include_uppercase",
    CharClass.LOWERCASE: "include_lowercase",
    CharClass.NUMBERS: "include_numbers",
    CharClass.SYMBOLS: "include_symbols",
}


def build_alphabet(config: Configuration) -> str:
    """Concatenate the enabled class strings; empty when nothing is enabled."""
    return "".join(cls.chars for cls in CLASS_ORDER if config.is_enabled(cls))


def estimate_entropy_bits(length: int, alphabet_size: int) -> float:
    if length <= 0 or alphabet_size <= 1: return 0.0
    return length * math.log2(alphabet_size)


# ---------------- Sampling ----------------

class EmptyAlphabetError(ValueError):
    """Raised when asked to sample from an empty alphabet."""

    def __init__(self) -> None:
        super().__init__("Character set is empty.")


class StringSampler:
    """Draws fixed-length strings uniformly from an alphabet.

    The random source is any ``random.Random``; the default draws from the OS
    entropy pool. Pass a seeded ``random.Random`` for reproducible output.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.SystemRandom()

    def sample(self, alphabet: str, length: int) -> str:
        if length < 1:
            raise ValueError(f"Length must be at least 1, got {length}.")
        if not alphabet:
            raise EmptyAlphabetError()
        return "".join(self.rng.choice(alphabet) for _ in range(length))
