"""Fixed arrays and growable lists."""

from __future__ import annotations

from collections.abc import Iterable


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed array and a list holding the same elements."""
    array = (10, 20, 30, 40)
    values = [10, 20, 30, 40]
    return array, values


def vec_loop(values: list[int]) -> list[int]:
    """Double each element of the list in place and return it."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list with each element doubled."""
    return [value * 2 for value in values]