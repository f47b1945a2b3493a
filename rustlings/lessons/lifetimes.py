"""Returning and holding on to borrowed strings."""

from __future__ import annotations

from dataclasses import dataclass


def longest(x: str, y: str) -> str:
    """Return the string with more UTF-8 bytes; the second one on a tie."""
    return x if len(x.encode("utf-8")) > len(y.encode("utf-8")) else y


@dataclass(frozen=True)
class Book:
    """A book that refers to its author and title."""

    author: str
    title: str

    def __str__(self) -> str:
        return f"{self.title} by {self.author}"