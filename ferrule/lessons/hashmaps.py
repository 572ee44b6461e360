"""Dictionaries: filling fruit baskets and building a scores table."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_DIGITS = frozenset("0123456789")
_U8_MAX = 255
_NEW_FRUIT_COUNT = 5


def fruit_basket() -> dict[str, int]:
    """A basket holding at least three kinds of fruit and five fruits in all."""
    return {"banana": 2, "apple": 4, "mango": 7}


class Fruit(enum.Enum):
    """The kinds of fruit that can go into a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_basket(basket: dict[Fruit, int]) -> dict[Fruit, int]:
    """Add five of every fruit kind missing from the basket; present kinds stay untouched."""
    for fruit in Fruit:
        basket.setdefault(fruit, _NEW_FRUIT_COUNT)
    return basket


@dataclass
class Team:
    """A team and the goals it scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(digits)
    if value > _U8_MAX:
        raise ValueError(f"goal count too large: {text!r}")
    return value


def _add_goals(current: int, extra: int) -> int:
    total = current + extra
    if total > _U8_MAX:
        raise OverflowError("attempt to add with overflow")
    return total


def update_team_info(
    scores: dict[str, Team], team_name: str, team_goals: int, opposing_team_goals: int
) -> None:
    """Add one match result to the team's entry, creating it if needed."""
    team = scores.get(team_name)
    if team is None:
        scores[team_name] = Team(team_name, team_goals, opposing_team_goals)
        return
    team.goals_scored = _add_goals(team.goals_scored, team_goals)
    team.goals_conceded = _add_goals(team.goals_conceded, opposing_team_goals)


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table from lines of the form team_1,team_2,goals_1,goals_2."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        goals_1 = _parse_goals(fields[2])
        goals_2 = _parse_goals(fields[3])
        update_team_info(scores, team_1, goals_1, goals_2)
        update_team_info(scores, team_2, goals_2, goals_1)
    return scores