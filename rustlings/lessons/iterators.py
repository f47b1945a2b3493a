"""Working with iterators: capitalising, dividing, factorials and counting."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Mapping

_U64_MAX = 2**64 - 1
_NUMBERS = (27, 297, 38502, 81)


def capitalize_first(text: str) -> str:
    """Upper-case the first character of the text."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise each word and return them as a list."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise each word and join them into one string."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(Exception):
    """A division could not be carried out exactly."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DivideByZeroError)

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Return a / b when a is evenly divisible by b; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def result_with_list() -> list[int]:
    """Divide each number by 27; raise the first DivisionError met."""
    return [divide(n, 27) for n in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide each number by 27, keeping each quotient or the error it raised."""

    def attempt(n: int) -> int | DivisionError:
        try:
            return divide(n, 27)
        except DivisionError as err:
            return err

    return [attempt(n) for n in _NUMBERS]


def factorial(num: int) -> int:
    """Return num!; raise OverflowError if it does not fit in 64 unsigned bits."""
    if num < 0:
        raise ValueError("factorial is only defined for non-negative numbers")
    result = math.factorial(num)
    if result > _U64_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return result


class Progress(enum.Enum):
    """How far an exercise has come."""

    NONE = enum.auto()
    SOME = enum.auto()
    COMPLETE = enum.auto()


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count the exercises with the given progress with an explicit loop."""
    count = 0
    for progress in progress_map.values():
        if progress == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count the exercises with the given progress."""
    return sum(1 for progress in progress_map.values() if progress == value)


def count_collection_for(collection: Iterable[Mapping[str, Progress]], value: Progress) -> int:
    """Count across several maps with explicit loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count across several maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)