"""Simple choices with if and else."""

from __future__ import annotations


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    if a > b:
        return a
    return b


def foo_if_fizz(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"