"""Shared behaviour: appending "Bar", default methods and combined traits."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or a "Bar" element to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    value.append("Bar")
    return value


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software versioned by a number."""

    version_number: int | None = None


@dataclass
class OtherSoftware(Licensed):
    """Software versioned by a string."""

    version_number: str | None = None


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether both pieces of software carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    """Provides some_function."""

    def some_function(self) -> bool:
        return True


class OtherTrait:
    """Provides other_function."""

    def other_function(self) -> bool:
        return True


@dataclass
class SomeStruct(SomeTrait, OtherTrait):
    """A named value with both traits."""

    name: str


def some_func(item: SomeTrait) -> bool:
    """Whether both functions of the item agree to go ahead."""
    return item.some_function() and item.other_function()