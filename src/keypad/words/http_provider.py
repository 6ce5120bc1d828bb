# keypad/words/http_provider.py
from __future__ import annotations
import logging
from typing import FrozenSet, Optional

import requests

from .. import config as CFG
from ..errors import DictionaryLoadError, DictionaryTimeoutError
from .api import parse_word_list

log = logging.getLogger(__name__)


class HttpWordProvider:
    """Fetches a newline-delimited word list over HTTP(S)."""
    def __init__(self, url: str, *, timeout: Optional[float] = None) -> None:
        self.url = url
        self.timeout = CFG.FETCH_TIMEOUT if timeout is None else float(timeout)

    def load(self) -> FrozenSet[str]:
        headers = {"User-Agent": CFG.USER_AGENT}
        log.info("Fetching word list from %s (timeout=%ss)", self.url, self.timeout)
        try:
            response = requests.get(self.url, headers=headers, timeout=self.timeout)
        except requests.exceptions.Timeout as exc:
            log.error("Word list fetch timed out after %ss: %s", self.timeout, self.url)
            raise DictionaryTimeoutError(
                f"fetch timed out after {self.timeout}s", source=self.url
            ) from exc
        except requests.exceptions.RequestException as exc:
            log.error("Word list fetch failed: %s", exc)
            raise DictionaryLoadError(f"failed to fetch words: {exc}", source=self.url) from exc

        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as exc:
            log.error("Word list fetch failed with HTTP %s: %s", response.status_code, self.url)
            raise DictionaryLoadError(
                f"failed to fetch words: {response.status_code} {response.reason}",
                source=self.url, status=response.status_code,
            ) from exc

        try:
            text = response.content.decode(CFG.ENCODING)
        except UnicodeDecodeError as exc:
            raise DictionaryLoadError(
                f"word list is not valid {CFG.ENCODING}", source=self.url, status=response.status_code
            ) from exc

        words = parse_word_list(text, source=self.url)
        log.info("Loaded %d words from %s", len(words), self.url)
        return words

    def close(self) -> None:
        pass
