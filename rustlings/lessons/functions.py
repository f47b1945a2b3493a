"""Small functions with parameters and return values."""

from __future__ import annotations


def call_me(num: int) -> None:
    """Print one numbered ring for each of the num calls."""
    for call in range(1, num + 1):
        print(f"Ring! Call number {call}")


def is_even(num: int) -> bool:
    """Whether the number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off an even price and 3 off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return the number multiplied by itself."""
    return num * num