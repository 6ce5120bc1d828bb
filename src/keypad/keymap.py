# keypad/keymap.py
from __future__ import annotations
from typing import Dict, List

# Letter-table order matters: it fixes the order of every permutation list.
KEYPAD: Dict[str, List[str]] = {
    "2": ["A", "B", "C"],
    "3": ["D", "E", "F"],
    "4": ["G", "H", "I"],
    "5": ["J", "K", "L"],
    "6": ["M", "N", "O"],
    "7": ["P", "Q", "R", "S"],
    "8": ["T", "U", "V"],
    "9": ["W", "X", "Y", "Z"],
}


def letters_for(digit: str) -> List[str]:
    """Letters on the key for `digit`, or [] when the key has none."""
    return KEYPAD.get(digit, [])
