"""Sharing read-only data between threads, and a recursive cons list."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import dataclass


def offset_sums(numbers: Iterable[int], workers: int = 8) -> list[int]:
    """Sum every workers-th value for each offset, one thread per offset.

    The result holds the sum for offset 0 first, then offset 1, and so on.
    """
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)
    sums = [0] * workers

    def worker(offset: int) -> None:
        total = sum(n for n in shared if n % workers == offset)
        print(f"Sum of offset {offset} is {total}")
        sums[offset] = total

    threads = [threading.Thread(target=worker, args=(offset,)) for offset in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return sums


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""

    def __repr__(self) -> str:
        return "Nil"


@dataclass(frozen=True)
class Cons:
    """A cons list cell: a value followed by the rest of the list."""

    value: int
    tail: Cons | Nil

    def __repr__(self) -> str:
        return f"Cons({self.value}, {self.tail!r})"


def create_empty_list() -> Nil:
    """Return an empty cons list."""
    return Nil()


def create_non_empty_list() -> Cons:
    """Return a cons list holding a single 3."""
    return Cons(3, Nil())