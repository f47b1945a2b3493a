"""Parsing text into a person, reporting what went wrong."""

from __future__ import annotations

from dataclasses import dataclass

from .from_into import _parse_usize


@dataclass(frozen=True)
class Person:
    """A named person of some age."""

    name: str
    age: int


class ParsePersonError(Exception):
    """The text could not be parsed into a person."""


class EmptyInput(ParsePersonError):
    """The input text was empty."""


class BadLen(ParsePersonError):
    """The input did not have exactly two comma separated fields."""


class NoName(ParsePersonError):
    """The name field was empty."""


class ParseIntFailed(ParsePersonError):
    """The age field is not an unsigned integer."""

    def __init__(self, error: ValueError) -> None:
        super().__init__(str(error))
        self.error = error


def parse_person(s: str) -> Person:
    """Parse "name,age" into a Person; raise a ParsePersonError subclass on failure."""
    if not s:
        raise EmptyInput("empty input")
    fields = s.split(",")
    if len(fields) != 2:
        raise BadLen(f"expected 2 fields, got {len(fields)}")
    name, age_text = fields
    if not name:
        raise NoName("empty name")
    try:
        age = _parse_usize(age_text)
    except ValueError as err:
        raise ParseIntFailed(err) from err
    return Person(name=name, age=age)