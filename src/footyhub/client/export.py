"""
Tabular export of standings.
"""

from __future__ import annotations

import pandas as pd

from footyhub.data.schemas import StandingsResponse

STANDINGS_COLUMNS = [
    "position",
    "team",
    "played",
    "won",
    "draw",
    "lost",
    "goal_difference",
    "points",
    "form",
]


def standings_to_frame(standings: StandingsResponse) -> pd.DataFrame:
    """One row per team of the first standings table, in table order."""
    records = [
        {
            "position": row.position,
            "team": row.team.display_name,
            "played": row.played_games,
            "won": row.won,
            "draw": row.draw,
            "lost": row.lost,
            "goal_difference": row.goal_difference,
            "points": row.points,
            "form": row.form,
        }
        for row in standings.table
    ]
    return pd.DataFrame.from_records(records, columns=STANDINGS_COLUMNS)


def standings_to_csv(standings: StandingsResponse) -> str:
    return standings_to_frame(standings).to_csv(index=False)
