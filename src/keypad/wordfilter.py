# keypad/wordfilter.py
from __future__ import annotations
from typing import AbstractSet, List, Union

from .models import Run, RunMapping
from .expand import run_permutations
from .segment import split_runs


def valid_words(run: Run, candidates: List[str], words: AbstractSet[str]) -> List[str]:
    """Keep candidates whose lowercase form is a dictionary word. Literal runs pass untouched."""
    if run.literal:
        return candidates
    return [c for c in candidates if c.lower() in words]


def run_valid(run: Run, words: AbstractSet[str]) -> List[str]:
    return valid_words(run, run_permutations(run), words)


def filter_valid(digits: str, words: AbstractSet[str]) -> Union[RunMapping, list]:
    """
    Same shape as expand(digits), each run narrowed to dictionary words.
    `words` must be the fully loaded lowercase word set.
    """
    if digits == "":
        return []
    out: RunMapping = {}
    for run in split_runs(digits):
        out[run.key] = run_valid(run, words)
    return out
