"""
Win-probability heuristic for two teams.

Each side gets a strength score from its league points and goal difference,
with a fixed bonus for the home side:

    score = points * 0.6 + goal_difference * 0.35 (+ 5 at home)

The home win probability is the home share of the summed scores, as a whole
percentage clamped to [0, 100]; the away side gets the rest.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from footyhub.client.state import Team, TeamRegistry
from footyhub.config import (
    DRAW_LABEL,
    DRAW_MARGIN,
    GOAL_DIFFERENCE_WEIGHT,
    HOME_ADVANTAGE,
    POINTS_WEIGHT,
)
from footyhub.errors import InvalidSelection


@dataclass(frozen=True)
class PredictionResult:
    home: Team
    away: Team
    home_win_probability: int
    away_win_probability: int
    outcome: str
    is_draw: bool


def team_score(team: Team, is_home: bool) -> float:
    """Strength score of a team, including the home bonus if applicable."""
    score = team.points * POINTS_WEIGHT + team.goal_difference * GOAL_DIFFERENCE_WEIGHT
    if is_home:
        score += HOME_ADVANTAGE
    return score


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def predict(home: Team, away: Team) -> PredictionResult:
    """
    Predict the outcome of `home` hosting `away`.

    Negative goal differences can push a score below zero, so the raw share
    may fall outside [0, 100]; it is clamped before the split.
    """
    if home.id == away.id:
        raise InvalidSelection("Teams must be different!")

    home_score = team_score(home, is_home=True)
    away_score = team_score(away, is_home=False)

    total = home_score + away_score
    if total == 0:
        total = 1

    home_prob = _round_half_up(home_score / total * 100)
    home_prob = min(100, max(0, home_prob))
    away_prob = 100 - home_prob

    is_draw = abs(home_prob - away_prob) < DRAW_MARGIN
    if is_draw:
        outcome = DRAW_LABEL
    else:
        outcome = home.name if home_prob > away_prob else away.name

    return PredictionResult(
        home=home,
        away=away,
        home_win_probability=home_prob,
        away_win_probability=away_prob,
        outcome=outcome,
        is_draw=is_draw,
    )


def predict_by_ids(
    registry: TeamRegistry,
    home_id: Optional[int],
    away_id: Optional[int],
) -> PredictionResult:
    """
    Look both teams up in the registry and run `predict`.

    Raises
    ------
    InvalidSelection
        If an id is unset, both ids are the same, or an id is unknown.
    """
    if not home_id or not away_id:
        raise InvalidSelection("Please select two teams!")
    if home_id == away_id:
        raise InvalidSelection("Teams must be different!")

    home = registry.get(home_id)
    away = registry.get(away_id)
    if home is None or away is None:
        raise InvalidSelection("Unknown team selected!")

    return predict(home, away)
