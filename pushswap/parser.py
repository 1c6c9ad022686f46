"""Validation of the command-line numbers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_DIGITS = frozenset("0123456789")


class InputError(ValueError):
    """Raised when the arguments are not a list of distinct 32-bit integers."""


def is_number(text: str) -> bool:
    """Return True if ``text`` is an optional sign followed by ASCII digits."""
    if text[:1] in ("+", "-"):
        text = text[1:]
    return bool(text) and all(ch in _DIGITS for ch in text)


def contains_duplicates(values: Iterable[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def parse_args(args: Sequence[str]) -> list[int]:
    """Turn the arguments into the initial contents of stack a, top first."""
    values = []
    for arg in args:
        if not is_number(arg):
            raise InputError(f"not a number: {arg!r}")
        value = int(arg)
        if not INT_MIN <= value <= INT_MAX:
            raise InputError(f"out of range: {arg!r}")
        values.append(value)
    if contains_duplicates(values):
        raise InputError("duplicate values")
    return values