# keypad/words/memory_provider.py
from __future__ import annotations
from typing import FrozenSet, Iterable

from ..errors import DictionaryLoadError


class MemoryWordProvider:
    """Fixed in-memory word set (useful for tests or embedded lists)."""
    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words = frozenset(w.strip().lower() for w in words if w.strip())

    def load(self) -> FrozenSet[str]:
        if not self._words:
            raise DictionaryLoadError("word list is empty", source="memory://")
        return self._words

    def close(self) -> None:
        pass
