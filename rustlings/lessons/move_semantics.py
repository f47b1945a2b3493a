"""Owning, borrowing and copying values."""

from __future__ import annotations

from collections.abc import Iterable

_FILL = (22, 44, 66)


def fill_vec(values: Iterable[int]) -> list[int]:
    """Return a new list with the values followed by 22, 44 and 66."""
    filled = list(values)
    filled.extend(_FILL)
    return filled


def new_filled_vec() -> list[int]:
    """Return a fresh list holding 22, 44 and 66."""
    return fill_vec(())


def add_twice(x: int) -> int:
    """Add 100 and then 1000 to the number."""
    x += 100
    x += 1000
    return x


def get_char(data: str) -> str:
    """Return the last character; raise ValueError for empty text."""
    if not data:
        raise ValueError("empty string has no last character")
    return data[-1]


def string_uppercase(data: str) -> str:
    """Print the text upper-cased and return it."""
    upper = data.upper()
    print(upper)
    return upper