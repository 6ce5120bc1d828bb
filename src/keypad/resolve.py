# keypad/resolve.py
from __future__ import annotations
import itertools
import logging
from typing import AbstractSet, List, Sequence, Tuple

from .models import ResolutionTree, ResolveResult, Run
from .segment import split_runs, is_atomic
from .wordfilter import run_valid

log = logging.getLogger(__name__)

# (diagnostic tree, final phrases) for one segment
_Resolved = Tuple[ResolutionTree, List[str]]


def _join_product(parts: Sequence[List[str]]) -> List[str]:
    """Space-join one pick from each part, last part varying fastest. Any empty part empties the result."""
    return [" ".join(combo) for combo in itertools.product(*parts)]


def _resolve_run(run: Run, words: AbstractSet[str]) -> _Resolved:
    """
    Resolve a single run.
      - valid words found       -> the list itself
      - none, longer than one   -> bisect at len // 2, resolve both halves
      - none, single character  -> [] (dead end, empties any enclosing product)
    """
    found = run_valid(run, words)
    if found:
        return found, found
    if len(run.key) == 1:
        return found, []

    mid = len(run.key) // 2
    left, right = run.key[:mid], run.key[mid:]
    log.debug("no words for %r; splitting into %r + %r", run.key, left, right)
    left_tree, left_phrases = resolve_segment(left, words)
    right_tree, right_phrases = resolve_segment(right, words)
    tree = {left: left_tree, right: right_tree}
    return tree, _join_product([left_phrases, right_phrases])


def resolve_segment(segment: str, words: AbstractSet[str]) -> _Resolved:
    """
    One descent that yields both views, so their split decisions always agree.
    A one-run segment resolves directly; anything else is resolved run by run
    and combined across runs in input order.
    """
    runs = split_runs(segment)
    if is_atomic(segment, runs):
        return _resolve_run(runs[0], words)

    tree: dict = {}
    pieces: List[List[str]] = []
    for run in runs:
        run_tree, run_phrases = _resolve_run(run, words)
        # repeated run keys share one entry; the phrase product still uses every run
        tree[run.key] = run_tree
        pieces.append(run_phrases)
    return tree, _join_product(pieces)


def resolve(digits: str, words: AbstractSet[str]) -> ResolveResult:
    """Full recursive resolution of `digits` against a loaded word set."""
    if digits == "":
        return ResolveResult(valid_permutations=[], final_results=[])
    tree, phrases = resolve_segment(digits, words)
    if not phrases:
        log.info("no valid phrase for %r", digits)
    return ResolveResult(valid_permutations=tree, final_results=phrases)


def tree_depth(tree: ResolutionTree) -> int:
    """Levels of mapping nesting in a resolution tree; a plain list is depth 0."""
    if isinstance(tree, dict):
        return 1 + max((tree_depth(sub) for sub in tree.values()), default=0)
    return 0
