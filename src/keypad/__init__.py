"""
Keypad Words

Turns telephone-keypad digit strings into letter combinations and narrows them
to dictionary words. Digit runs with no whole-run word are bisected and
resolved half by half, giving space-joined multi-word phrases.

Pipeline:
    digits -> runs (split on 0/1) -> letter permutations -> dictionary filter
           -> recursive midpoint split for runs with no word -> phrases

Example Usage:
    from keypad import Engine

    eng = Engine()
    eng.load("memory://", words=["wt", "wu", "xu", "yt"])
    eng.filter_valid("981")    # {'98': ['WT', 'WU', 'XU', 'YT'], '1': ['1']}
    eng.resolve("981").final_results
"""

# src/keypad/__init__.py
from .engine import Engine
from .expand import expand
from .wordfilter import filter_valid
from .resolve import resolve, tree_depth
from .models import Run, ResolveResult
from .errors import KeypadError, DictionaryLoadError, DictionaryTimeoutError, UnmappedDigitError

__version__ = "1.0.0"
__all__ = [
    "Engine", "expand", "filter_valid", "resolve", "tree_depth",
    "Run", "ResolveResult",
    "KeypadError", "DictionaryLoadError", "DictionaryTimeoutError", "UnmappedDigitError",
]
