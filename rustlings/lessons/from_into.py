"""Converting text to a person, falling back to a default one."""

from __future__ import annotations

from dataclasses import dataclass

_USIZE_MAX = 2**64 - 1
_DIGITS = frozenset("0123456789")


def _parse_usize(text: str) -> int:
    """Parse an unsigned 64-bit integer strictly; raise ValueError on bad input."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] == "+" else text
    if not digits or not _DIGITS.issuperset(digits):
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


@dataclass(frozen=True)
class Person:
    """A named person of some age; the default is 30 year old John."""

    name: str = "John"
    age: int = 30


def person_from(s: str) -> Person:
    """Parse "name,age"; return the default person when the text does not fit."""
    if not s:
        return Person()
    fields = s.split(",")
    if len(fields) != 2:
        return Person()
    name, age_text = fields
    if not name:
        return Person()
    try:
        age = _parse_usize(age_text)
    except ValueError:
        return Person()
    return Person(name=name, age=age)