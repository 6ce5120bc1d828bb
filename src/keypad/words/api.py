# keypad/words/api.py
from __future__ import annotations
import logging
import re
from typing import FrozenSet, Iterable, Optional, Protocol

from ..errors import DictionaryLoadError

log = logging.getLogger(__name__)

_LINE_SPLIT = re.compile(r"\r?\n")


class WordProvider(Protocol):
    # Load the full lowercase word set; raise DictionaryLoadError on failure
    def load(self) -> FrozenSet[str]: ...
    # lifecycle
    def close(self) -> None: ...


def parse_word_list(text: str, *, source: str = "") -> FrozenSet[str]:
    """Newline-delimited word list -> lowercase set. Blank lines are dropped."""
    words = frozenset(w.strip().lower() for w in _LINE_SPLIT.split(text) if w.strip())
    if not words:
        raise DictionaryLoadError("word list is empty", source=source)
    return words


def make_provider(source: str, *, words: Optional[Iterable[str]] = None,
                  timeout: Optional[float] = None) -> WordProvider:
    """
    Factory:
      - http(s)://...      -> HttpWordProvider (fetched with requests)
      - file:///path, path -> FileWordProvider
      - memory://          -> MemoryWordProvider (seeded with `words`)
    """
    if words is not None and not source.startswith("memory://"):
        raise ValueError(f"words= only seeds memory:// sources, not {source!r}")

    if source.startswith(("http://", "https://")):
        from .http_provider import HttpWordProvider
        return HttpWordProvider(source, timeout=timeout)

    if source.startswith("memory://"):
        from .memory_provider import MemoryWordProvider
        return MemoryWordProvider(words or ())

    if source.startswith("file://"):
        from .file_provider import FileWordProvider
        return FileWordProvider(source.removeprefix("file://"))

    if "://" in source or not source:
        raise ValueError(f"Unsupported word source: {source!r}")

    from .file_provider import FileWordProvider
    return FileWordProvider(source)


class CachedWordProvider:
    """
    Keeps the first successful load of the wrapped provider.
    A failed load drops whatever was cached and re-raises, so a stale set is never served.
    """
    def __init__(self, inner: WordProvider) -> None:
        self._inner = inner
        self._words: Optional[FrozenSet[str]] = None

    @property
    def cached(self) -> bool:
        return self._words is not None

    def load(self) -> FrozenSet[str]:
        if self._words is not None:
            log.debug("word set cache hit (%d words)", len(self._words))
            return self._words
        try:
            self._words = self._inner.load()
        except DictionaryLoadError:
            self._words = None
            log.warning("word set load failed; cache invalidated")
            raise
        return self._words

    def clear(self) -> None:
        self._words = None

    def close(self) -> None:
        try:
            self._inner.close()
        finally:
            self._words = None
