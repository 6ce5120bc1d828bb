# keypad/config.py
from __future__ import annotations
import os

# /* ~~~ remote word list (newline-delimited, one lowercase word per line) ~~~ */
WORDLIST_URL: str = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"

# seconds to wait on the word-list fetch before giving up
FETCH_TIMEOUT: float = 10.0
USER_AGENT: str = "keypad-words/1.0"
ENCODING: str = "utf-8"

# digits with no letters; each one is its own run and passes through unchanged
LITERAL_DIGITS: tuple[str, ...] = ("0", "1")

# reject non-digit input up front instead of collapsing the run to empty
STRICT_DIGITS: bool = False

# keep the loaded word set across calls (read-only, dropped on load failure)
CACHE_WORDS: bool = True

# Progress logging (set KEYPAD_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("KEYPAD_VERBOSE") == "1"
