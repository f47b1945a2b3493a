"""Counting fruit and tallying football scores with dictionaries."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .errors import _parse_int

_U8_MAX = 255
_DEFAULT_NEW_FRUIT = 3


def default_fruit_basket() -> dict[str, int]:
    """Return a basket of at least three kinds and five pieces of fruit."""
    return {
        "banana": 2,
        "banana1": 2,
        "banana2": 2,
        "banana3": 2,
        "banana4": 2,
        "banana5": 2,
    }


class Fruit(enum.Enum):
    """Kinds of fruit a basket can hold."""

    APPLE = enum.auto()
    BANANA = enum.auto()
    MANGO = enum.auto()
    LYCHEE = enum.auto()
    PINEAPPLE = enum.auto()


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add three of every kind of fruit not already in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, _DEFAULT_NEW_FRUIT)


@dataclass
class Team:
    """A team and the goals it scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _add_goals(current: int, extra: int) -> int:
    total = current + extra
    if total > _U8_MAX:
        raise OverflowError("attempt to add with overflow")
    return total


def _record(scores: dict[str, Team], name: str, scored: int, conceded: int) -> None:
    team = scores.get(name)
    if team is None:
        scores[name] = Team(name, scored, conceded)
        return
    team.goals_scored = _add_goals(team.goals_scored, scored)
    team.goals_conceded = _add_goals(team.goals_conceded, conceded)


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part.removesuffix("\r") for part in parts]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of teams from lines of "team1,team2,goals1,goals2".

    Raises ValueError for a malformed line or a goal count outside 0..=255.
    """
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed score line: {line!r}")
        home, away = fields[0], fields[1]
        home_goals = _parse_int(fields[2], 0, _U8_MAX)
        away_goals = _parse_int(fields[3], 0, _U8_MAX)
        _record(scores, home, home_goals, away_goals)
        _record(scores, away, away_goals, home_goals)
    return scores