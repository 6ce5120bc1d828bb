# keypad/errors.py
from __future__ import annotations
from typing import Optional


class KeypadError(Exception):
    """Base class for keypad pipeline failures."""


class DictionaryLoadError(KeypadError):
    """The word set could not be fetched or parsed. Never treated as an empty dictionary."""

    def __init__(self, message: str, *, source: str = "", status: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.source = source
        self.status = status

    def __str__(self) -> str:
        if self.status is not None:
            return f"{self.message} (status={self.status}, source={self.source})"
        return f"{self.message} (source={self.source})" if self.source else self.message


class DictionaryTimeoutError(DictionaryLoadError):
    """The word-list fetch exceeded its time bound."""


class UnmappedDigitError(KeypadError, ValueError):
    """Input holds characters outside '0'-'9'. Only raised in strict mode."""

    def __init__(self, digits: str, bad: str) -> None:
        super().__init__(f"unmapped characters {bad!r} in input {digits!r}")
        self.digits = digits
        self.bad = bad
