# -*- coding: utf-8 -*-

"""Bounded, most-recent-first log of generated strings."""

from typing import Iterator, List, Tuple

from .config import HISTORY_LIMIT


class HistoryLog:
    def __init__(self, limit: int = HISTORY_LIMIT) -> None:
        self.limit = limit
        self._entries: List[str] = []

    def push(self, entry: str) -> None:
        # newest first, oldest beyond the limit falls off; no dedup
        self._entries.insert(0, entry)
        del self._entries[self.limit:]

    def clear(self) -> None:
        self._entries.clear()

    def snapshot(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())
