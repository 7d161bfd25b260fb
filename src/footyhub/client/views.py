"""
Screen-level view functions.

Each function takes the session's `HubContext`, loads what the screen needs
(through the standings cache where possible) and returns HTML fragments.
A failed fetch never raises out of a view: it is rendered as the generic
error banner.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from footyhub.client.prediction import predict_by_ids
from footyhub.client.render import (
    NO_LIVE_MATCHES,
    create_match_cards,
    create_standings_table,
    error_banner,
    info_banner,
    prediction_message,
    render_prediction,
    render_team_options,
)
from footyhub.client.state import HubContext
from footyhub.config import (
    DEFAULT_STANDINGS_CODE,
    LEAGUE_TABS,
    PRELOAD_COMPETITIONS,
    TAB_LIVE,
    TAB_PREDICTOR,
    TAB_STANDINGS,
    TABS,
    UPCOMING_MATCHES_LIMIT,
    UPCOMING_STATUSES,
)
from footyhub.data.schemas import Match, parse_matches
from footyhub.errors import FetchError, InvalidSelection, MalformedPayloadError
from footyhub.utils.logging_utils import get_logger

logger = get_logger(__name__)


@dataclass
class TabView:
    """Fragments produced for one tab, keyed by page section."""

    tab: str
    sections: Dict[str, str] = field(default_factory=dict)
    error: bool = False


def _fetch_matches(ctx: HubContext, endpoint: str) -> List[Match]:
    payload = ctx.api.fetch(endpoint)
    try:
        return parse_matches(payload).matches
    except MalformedPayloadError as exc:
        raise FetchError(str(exc)) from exc


def upcoming_matches(matches: List[Match], limit: int = UPCOMING_MATCHES_LIMIT) -> List[Match]:
    """Scheduled, timed or in-play matches, in API order, at most `limit`."""
    return [m for m in matches if m.status in UPCOMING_STATUSES][:limit]


def load_initial_data(ctx: HubContext) -> None:
    """Preload standings so the predictor dropdowns are populated."""
    for code in PRELOAD_COMPETITIONS:
        try:
            ctx.get_standings(code)
        except FetchError as exc:
            logger.warning("Could not preload standings for %s: %s", code, exc)


def load_live_matches(ctx: HubContext) -> TabView:
    view = TabView(tab=TAB_LIVE)
    try:
        matches = _fetch_matches(ctx, "matches/today")
    except FetchError:
        view.sections["live-matches"] = error_banner()
        view.error = True
        return view

    if not matches:
        view.sections["live-matches"] = info_banner(NO_LIVE_MATCHES)
    else:
        view.sections["live-matches"] = create_match_cards(matches)
    return view


def load_standings(ctx: HubContext, code: str = DEFAULT_STANDINGS_CODE) -> TabView:
    """Standings table for one competition, served from the cache when possible."""
    view = TabView(tab=TAB_STANDINGS)
    try:
        standings = ctx.get_standings(code)
    except FetchError:
        view.sections["standings-table"] = error_banner()
        view.error = True
        return view

    view.sections["standings-table"] = create_standings_table(standings)
    return view


def load_league_specifics(ctx: HubContext, tab: str) -> TabView:
    """Upcoming fixtures and table for a league tab such as "premier-league"."""
    code = LEAGUE_TABS[tab]
    view = TabView(tab=tab)

    try:
        matches = _fetch_matches(ctx, f"matches/{code}")
    except FetchError:
        view.error = True
    else:
        view.sections["matches"] = create_match_cards(upcoming_matches(matches))

    try:
        standings = ctx.get_standings(code)
    except FetchError:
        view.error = True
    else:
        view.sections["standings"] = create_standings_table(standings)

    if view.error:
        view.sections["error"] = error_banner()
    return view


def team_select_options(
    ctx: HubContext,
    home_selected: Optional[int] = None,
    away_selected: Optional[int] = None,
) -> Dict[str, str]:
    """Option lists for the home and away dropdowns."""
    teams = ctx.registry.teams
    return {
        "home": render_team_options(teams, "Select Home Team", home_selected),
        "away": render_team_options(teams, "Select Away Team", away_selected),
    }


def predict_view(
    ctx: HubContext,
    home_id: Optional[int],
    away_id: Optional[int],
) -> str:
    """Prediction panel, or the selection problem as a short message."""
    try:
        result = predict_by_ids(ctx.registry, home_id, away_id)
    except InvalidSelection as exc:
        return prediction_message(str(exc))
    return render_prediction(result)


def switch_tab(ctx: HubContext, tab: str) -> TabView:
    """Make `tab` current and load its data."""
    if tab not in TABS:
        raise ValueError(f"Unknown tab: {tab!r}")

    ctx.current_tab = tab
    if tab == TAB_LIVE:
        return load_live_matches(ctx)
    if tab == TAB_STANDINGS:
        return load_standings(ctx, DEFAULT_STANDINGS_CODE)
    if tab in LEAGUE_TABS:
        return load_league_specifics(ctx, tab)

    view = TabView(tab=TAB_PREDICTOR)
    view.sections.update(team_select_options(ctx))
    return view
