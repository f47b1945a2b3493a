"""Counting bytes and characters, and squaring a number."""

from __future__ import annotations

_U32_MAX = 2**32 - 1


def byte_counter(arg: str) -> int:
    """Return the number of UTF-8 bytes in the text."""
    return len(arg.encode("utf-8"))


def char_counter(arg: str) -> int:
    """Return the number of characters in the text."""
    return len(arg)


def num_sq(arg: int) -> int:
    """Return the square of an unsigned 32-bit number.

    Raises ValueError for a negative number and OverflowError when the
    square does not fit in 32 bits.
    """
    if arg < 0 or arg > _U32_MAX:
        raise ValueError(f"{arg} is not an unsigned 32-bit number")
    square = arg * arg
    if square > _U32_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return square