# keypad/models.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Union

# run key -> ordered candidate list; dicts keep insertion (= input) order
RunMapping = Dict[str, List[str]]

# a resolved list, or {left_half: subtree, right_half: subtree} / {run: subtree}
ResolutionTree = Union[List[str], Dict[str, "ResolutionTree"]]


@dataclass(frozen=True)
class Run:
    key: str          # the digit substring itself
    literal: bool     # True for a single "0" or "1"


@dataclass(frozen=True)
class ResolveResult:
    valid_permutations: Union[ResolutionTree, List[Any]]
    final_results: List[str]

    def to_dict(self) -> dict:
        return {
            "validPermutations": self.valid_permutations,
            "finalResults": list(self.final_results),
        }
