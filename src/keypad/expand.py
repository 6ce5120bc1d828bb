# keypad/expand.py
from __future__ import annotations
import logging
from typing import List, Union

from .keymap import letters_for
from .models import Run, RunMapping
from .segment import split_runs

log = logging.getLogger(__name__)


def run_permutations(run: Run) -> List[str]:
    """
    Cartesian product of letter choices for one run.
    Literal runs expand to themselves. Later digits vary fastest.
    A digit without letters empties the whole run.
    """
    if run.literal:
        return [run.key]

    combos = [""]
    for digit in run.key:
        letters = letters_for(digit)
        if not letters:
            log.warning("no keypad letters for %r; run %r has no combinations", digit, run.key)
            return []
        combos = [prefix + letter for prefix in combos for letter in letters]
    return combos


def expand(digits: str) -> Union[RunMapping, list]:
    """
    All letter permutations of `digits`, keyed by run.

        >>> expand("213")
        {'2': ['A', 'B', 'C'], '1': ['1'], '3': ['D', 'E', 'F']}

    Empty input gives [] rather than {}.
    """
    if digits == "":
        return []
    out: RunMapping = {}
    for run in split_runs(digits):
        out[run.key] = run_permutations(run)
    return out
