"""Report cards with numeric or alphabetical grades."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from decimal import Decimal

_BANDS = (
    (-1.0, 1.0, "F-"),
    (1.0, 1.5, "F"),
    (1.5, 2.0, "D"),
    (2.0, 2.5, "C"),
    (2.5, 3.0, "C+"),
    (3.0, 3.5, "B"),
    (4.0, 4.5, "B+"),
    (4.5, 5.0, "A"),
    (5.0, 5.5, "A+"),
)


def _to_f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def grade_as_number(grade: float) -> str:
    """Format the grade as a single-precision number, as short as round-trips."""
    value = _to_f32(grade)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    for precision in range(1, 10):
        candidate = f"{value:.{precision}g}"
        if _to_f32(float(candidate)) == value:
            text = candidate
            break
    return format(Decimal(text), "f")


def grade_as_string(grade: float) -> str:
    """Map a numeric grade to a letter grade; "Invalid" when no band fits."""
    value = _to_f32(grade)
    for low, high, letter in _BANDS:
        if low <= value <= high:
            return letter
    if value > 5.5:
        return "A+"
    return "Invalid"


@dataclass
class ReportCard:
    """A student's report card."""

    grade: float
    student_name: str
    student_age: int
    use_grade_as_string: bool = False

    def render(self) -> str:
        shown = (
            grade_as_string(self.grade)
            if self.use_grade_as_string
            else grade_as_number(self.grade)
        )
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {shown}"