# keypad/engine.py
from __future__ import annotations

import os
import logging
import string
from typing import FrozenSet, Iterable, Optional, Union

from . import config as CFG
from .errors import UnmappedDigitError
from .models import ResolveResult, RunMapping
from .expand import expand as _expand
from .wordfilter import filter_valid as _filter_valid
from .resolve import resolve as _resolve
from .words.api import WordProvider, CachedWordProvider, make_provider

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - a word-set provider (HTTP, local file or in-memory),
      - the expand -> filter -> resolve pipeline.

    Public API (used by CLI/Flask):
      * load(source, ...):  pick a provider and load the word set
      * expand(digits):     raw letter permutations per run
      * filter_valid(digits): permutations narrowed to dictionary words
      * resolve(digits):    recursive split resolution + final phrases
      * shutdown():         drop the provider and any cached words

    Word sources (via keypad.words.make_provider):
      - "https://host/words.txt"
      - "file:///path/words.txt" or a plain path
      - "memory://" together with words=[...]
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        provider: Optional[WordProvider] = None,
        *,
        cache: Optional[bool] = None,
        strict: Optional[bool] = None,
    ) -> None:
        self.cache = CFG.CACHE_WORDS if cache is None else cache
        self.strict = CFG.STRICT_DIGITS if strict is None else strict
        self._provider: Optional[WordProvider] = None
        if provider is not None:
            self._set_provider(provider)

    # /* ~~~ Choose a word source and load it up front ~~~ */
    def load(
        self,
        source: Optional[str] = None,
        *,
        words: Optional[Iterable[str]] = None,   # seed for "memory://"
        timeout: Optional[float] = None,         # seconds; HTTP sources only
        verbose: bool = False,
    ) -> int:
        if verbose or CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)
            os.environ["KEYPAD_VERBOSE"] = "1"

        src = source or CFG.WORDLIST_URL
        log.info("Initializing word provider: %s", src)
        self._set_provider(make_provider(src, words=words, timeout=timeout))
        loaded = self.words()
        log.info("Engine load() complete: words=%d", len(loaded))
        return len(loaded)

    # ------------- queries -------------

    def words(self) -> FrozenSet[str]:
        """The full word set; blocks until loaded. Load failures propagate."""
        if self._provider is None:
            raise RuntimeError("Engine not initialized. Call load() or pass a provider first.")
        return self._provider.load()

    def expand(self, digits: str) -> Union[RunMapping, list]:
        self._check(digits)
        return _expand(digits)

    def filter_valid(self, digits: str) -> Union[RunMapping, list]:
        self._check(digits)
        if digits == "":
            return []
        return _filter_valid(digits, self.words())

    def resolve(self, digits: str) -> ResolveResult:
        self._check(digits)
        if digits == "":
            return _resolve(digits, frozenset())
        return _resolve(digits, self.words())

    # ------------- teardown -------------

    # /* ~~~ Release the provider and cached words ~~~ */
    def shutdown(self) -> None:
        try:
            if self._provider:
                self._provider.close()
        finally:
            self._provider = None
            log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _set_provider(self, provider: WordProvider) -> None:
        if self._provider is not None:
            self._provider.close()
        if self.cache and not isinstance(provider, CachedWordProvider):
            provider = CachedWordProvider(provider)
        self._provider = provider

    def _check(self, digits: str) -> None:
        bad = "".join(sorted({ch for ch in digits if ch not in string.digits}))
        if not bad:
            return
        if self.strict:
            raise UnmappedDigitError(digits, bad)
        log.warning("input %r holds unmapped characters %r; affected runs will be empty", digits, bad)
