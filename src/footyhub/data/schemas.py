"""
Schema and validation utilities for football-data.org v4 payloads.

Only the fields FootyHub actually reads are declared; anything else the API
sends is ignored. Field names are snake_case with camelCase aliases matching
the wire format.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from footyhub.errors import MalformedPayloadError
from footyhub.utils.logging_utils import get_logger

logger = get_logger(__name__)


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class TeamRef(_Payload):
    """A team as embedded in standings rows and matches."""

    id: int
    name: str
    short_name: Optional[str] = Field(default=None, alias="shortName")
    crest: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.short_name or self.name


class StandingRow(_Payload):
    """One line of a league table."""

    position: int
    team: TeamRef
    played_games: int = Field(alias="playedGames")
    won: int
    draw: int
    lost: int
    points: int
    goal_difference: int = Field(alias="goalDifference")
    form: Optional[str] = None


class StandingGroup(_Payload):
    """A table within a standings response (TOTAL, HOME, AWAY...)."""

    type: Optional[str] = None
    table: List[StandingRow] = Field(default_factory=list)


class CompetitionRef(_Payload):
    id: Optional[int] = None
    name: str
    code: Optional[str] = None


class StandingsResponse(_Payload):
    """Response of `competitions/{code}/standings`."""

    competition: Optional[CompetitionRef] = None
    standings: List[StandingGroup] = Field(default_factory=list)

    @property
    def table(self) -> List[StandingRow]:
        """The first (overall) table, or an empty list."""
        if not self.standings:
            return []
        return self.standings[0].table


class FullTimeScore(_Payload):
    home: Optional[int] = None
    away: Optional[int] = None


class Score(_Payload):
    full_time: FullTimeScore = Field(
        default_factory=FullTimeScore, alias="fullTime"
    )


class Match(_Payload):
    """A fixture as returned by the matches endpoints."""

    id: int
    utc_date: datetime = Field(alias="utcDate")
    status: str
    competition: Optional[CompetitionRef] = None
    home_team: TeamRef = Field(alias="homeTeam")
    away_team: TeamRef = Field(alias="awayTeam")
    score: Score = Field(default_factory=Score)


class MatchesResponse(_Payload):
    """Response of `matches` and `competitions/{code}/matches`."""

    matches: List[Match] = Field(default_factory=list)


PayloadModel = TypeVar("PayloadModel", bound=BaseModel)


def _validate(model: Type[PayloadModel], payload: Any) -> PayloadModel:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        logger.warning(
            "Rejected malformed %s payload: %d error(s)",
            model.__name__,
            exc.error_count(),
        )
        raise MalformedPayloadError(
            f"Malformed {model.__name__} payload: {exc.errors()[0]['msg']}"
        ) from exc


def parse_standings(payload: Any) -> StandingsResponse:
    """
    Validate a raw standings payload.

    Raises
    ------
    MalformedPayloadError
        If the payload does not match `StandingsResponse`.
    """
    return _validate(StandingsResponse, payload)


def parse_matches(payload: Any) -> MatchesResponse:
    """
    Validate a raw matches payload.

    Raises
    ------
    MalformedPayloadError
        If the payload does not match `MatchesResponse`.
    """
    return _validate(MatchesResponse, payload)


def ensure_object(payload: Any) -> Dict[str, Any]:
    """Check that a pass-through payload is at least a JSON object."""
    if not isinstance(payload, dict):
        raise MalformedPayloadError(
            f"Expected a JSON object, got {type(payload).__name__}"
        )
    return payload
