"""Reporting failures: empty names, bad quantities and non-positive numbers."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1
_I64_MIN, _I64_MAX = -(2**63), 2**63 - 1
_DIGITS = frozenset("0123456789")

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, low: int, high: int) -> int:
    """Parse a decimal integer within [low, high] strictly; raise ValueError otherwise."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    negative = False
    digits = text
    if text[0] == "+":
        digits = text[1:]
    elif text[0] == "-" and low < 0:
        negative = True
        digits = text[1:]
    if not digits or not _DIGITS.issuperset(digits):
        raise ValueError("invalid digit found in string")
    value = -int(digits) if negative else int(digits)
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def _check_i32(value: int, operation: str) -> int:
    if not _I32_MIN <= value <= _I32_MAX:
        raise OverflowError(f"attempt to {operation} with overflow")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the nametag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens for a typed quantity: 5 per item plus a fee of 1.

    Raises ValueError when the quantity is not a 32-bit integer and
    OverflowError when the cost does not fit in 32 bits.
    """
    quantity = _parse_int(item_quantity, _I32_MIN, _I32_MAX)
    items = _check_i32(quantity * _COST_PER_ITEM, "multiply")
    return _check_i32(items + _PROCESSING_FEE, "add")


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Buy the typed quantity if affordable and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    remaining = tokens - cost
    print(f"You now have {remaining} tokens.")
    return remaining


class CreationErrorKind(enum.Enum):
    """Why a positive non-zero integer could not be made."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"

    def __str__(self) -> str:
        return self.value


class CreationError(ValueError):
    """The value is not a positive non-zero integer."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero; construction raises CreationError otherwise."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


class ParsePosNonzeroError(Exception):
    """Text could not be turned into a positive non-zero integer.

    ``cause`` is the CreationError or the integer parsing ValueError behind it.
    """

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse a 64-bit integer and check it is positive; raise ParsePosNonzeroError."""
    try:
        value = _parse_int(s, _I64_MIN, _I64_MAX)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err