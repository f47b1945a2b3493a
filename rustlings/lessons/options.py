"""Optional values: ice cream in the fridge, popping lists and matching points."""

from __future__ import annotations

from dataclasses import dataclass

_U16_MAX = 2**16 - 1


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at the given hour; None for an hour past 24.

    Raises ValueError for a value that is not an unsigned 16-bit number.
    """
    if not 0 <= time_of_day <= _U16_MAX:
        raise ValueError(f"{time_of_day} is not an unsigned 16-bit number")
    if 22 <= time_of_day <= 24:
        return 0
    if time_of_day < 22:
        return 5
    return None


def pop_until_none(values: list[int | None]) -> list[int]:
    """Pop values from the end until the list is empty or a None is popped."""
    popped: list[int] = []
    while values:
        value = values.pop()
        if value is None:
            break
        print(f"current value: {value}")
        popped.append(value)
    return popped


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: int
    y: int


def describe_point(point: Point | None) -> str:
    """Print and return a description of the point, or "no match"."""
    match point:
        case Point(x=x, y=y):
            text = f"Co-ordinates are {x},{y} "
        case _:
            text = "no match"
    print(text)
    return text