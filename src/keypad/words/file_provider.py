# keypad/words/file_provider.py
from __future__ import annotations
import logging
import os
from typing import FrozenSet

from .. import config as CFG
from ..errors import DictionaryLoadError
from .api import parse_word_list

log = logging.getLogger(__name__)


class FileWordProvider:
    """Word list from a local text file, one word per line."""
    def __init__(self, path: str) -> None:
        self.path = os.path.abspath(path)

    def load(self) -> FrozenSet[str]:
        try:
            with open(self.path, "r", encoding=CFG.ENCODING) as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise DictionaryLoadError(f"cannot read word list: {exc}", source=self.path) from exc
        words = parse_word_list(text, source=self.path)
        log.info("Loaded %d words from %s", len(words), self.path)
        return words

    def close(self) -> None:
        pass
