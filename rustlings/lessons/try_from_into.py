"""Fallible conversion of integer triples into RGB colours."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


class IntoColorError(Exception):
    """The values could not be turned into a colour."""


class BadLen(IntoColorError):
    """The sequence does not hold exactly three values."""


class IntConversion(IntoColorError):
    """A value lies outside 0..=255."""


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in 0..=255."""

    red: int
    green: int
    blue: int


def _component(value: int) -> int:
    if not 0 <= value <= 255:
        raise IntConversion(f"{value} is not in 0..=255")
    return value


def color_from_tuple(rgb: tuple[int, int, int]) -> Color:
    """Build a colour from a red, green, blue triple; raise IntConversion if out of range."""
    red, green, blue = rgb
    return Color(_component(red), _component(green), _component(blue))


def color_from_slice(values: Sequence[int]) -> Color:
    """Build a colour from a sequence; raise BadLen unless it holds exactly three values."""
    if len(values) != 3:
        raise BadLen(f"expected 3 values, got {len(values)}")
    return color_from_tuple(tuple(values))