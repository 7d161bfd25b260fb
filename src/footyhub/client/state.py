"""
Per-session state: the standings cache, the team registry and the context
object that bundles them for the view functions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from footyhub.client.api_client import HubApiClient
from footyhub.config import TAB_LIVE
from footyhub.data.schemas import StandingRow, StandingsResponse, parse_standings
from footyhub.errors import FetchError, MalformedPayloadError
from footyhub.utils.logging_utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Team:
    """A team known to the predictor, as it stood when first registered."""

    id: int
    name: str
    points: int
    goal_difference: int
    form: Optional[str] = None
    position: Optional[int] = None

    @classmethod
    def from_row(cls, row: StandingRow) -> "Team":
        return cls(
            id=row.team.id,
            name=row.team.display_name,
            points=row.points,
            goal_difference=row.goal_difference,
            form=row.form,
            position=row.position,
        )


class TeamRegistry:
    """
    Deduplicated list of teams, kept sorted by name.

    Teams are only ever added; a team seen again in a later standings payload
    keeps the stats it was first registered with.
    """

    def __init__(self) -> None:
        self._teams: List[Team] = []
        self._ids: set[int] = set()

    def __len__(self) -> int:
        return len(self._teams)

    def __iter__(self):
        return iter(self._teams)

    def __contains__(self, team_id: object) -> bool:
        return team_id in self._ids

    @property
    def teams(self) -> List[Team]:
        return list(self._teams)

    def get(self, team_id: int) -> Optional[Team]:
        for team in self._teams:
            if team.id == team_id:
                return team
        return None

    def register_teams(self, standings: StandingsResponse) -> bool:
        """
        Add every team of the first standings table that is not known yet.

        Returns
        -------
        bool
            True if at least one team was added (and the list re-sorted).
        """
        added = 0
        for row in standings.table:
            if row.team.id in self._ids:
                continue
            self._teams.append(Team.from_row(row))
            self._ids.add(row.team.id)
            added += 1

        if added:
            self._teams.sort(key=lambda t: t.name.casefold())
            logger.debug("Registered %d new team(s); %d known.", added, len(self))
        return bool(added)


class StandingsCache:
    """Competition code -> standings payload. Entries never expire."""

    def __init__(self) -> None:
        self._entries: Dict[str, StandingsResponse] = {}

    def __contains__(self, code: object) -> bool:
        return code in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(
        self,
        code: str,
        fetch: Callable[[str], StandingsResponse],
    ) -> StandingsResponse:
        """Return the cached payload for `code`, fetching and storing it once."""
        cached = self._entries.get(code)
        if cached is not None:
            return cached

        standings = fetch(code)
        self._entries[code] = standings
        return standings


@dataclass
class HubContext:
    """
    Everything a view function needs, owned by one UI session.

    Attributes
    ----------
    api : HubApiClient
        Client for the relay.
    cache : StandingsCache
        Standings fetched so far, per competition code.
    registry : TeamRegistry
        Teams available to the predictor.
    current_tab : str
        Tab the user is looking at.
    """

    api: HubApiClient
    cache: StandingsCache = field(default_factory=StandingsCache)
    registry: TeamRegistry = field(default_factory=TeamRegistry)
    current_tab: str = TAB_LIVE

    def fetch_standings(self, code: str) -> StandingsResponse:
        """Fetch and validate standings, bypassing the cache."""
        payload = self.api.fetch(f"standings/{code}")
        try:
            return parse_standings(payload)
        except MalformedPayloadError as exc:
            raise FetchError(str(exc)) from exc

    def get_standings(self, code: str) -> StandingsResponse:
        """Cached standings for `code`; the registry is updated either way."""
        standings = self.cache.get(code, self.fetch_standings)
        self.registry.register_teams(standings)
        return standings
