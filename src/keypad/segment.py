# keypad/segment.py
from __future__ import annotations
from typing import List

from .config import LITERAL_DIGITS
from .models import Run


def split_runs(digits: str) -> List[Run]:
    """
    Split a digit string into runs, left to right.
    Letter digits accumulate into one run; every '0' / '1' closes the pending
    run and becomes a run of its own. Concatenating the keys gives back `digits`.
    """
    runs: List[Run] = []
    pending = ""
    for ch in digits:
        if ch in LITERAL_DIGITS:
            if pending:
                runs.append(Run(pending, literal=False))
                pending = ""
            runs.append(Run(ch, literal=True))
        else:
            pending += ch
    if pending:
        runs.append(Run(pending, literal=False))
    return runs


def is_atomic(segment: str, runs: List[Run]) -> bool:
    """True when `segment` is exactly one run."""
    return len(runs) == 1 and runs[0].key == segment
