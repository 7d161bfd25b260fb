"""
HTML fragment rendering for FootyHub.

All markup lives in Jinja2 templates under `footyhub/templates`; values are
autoescaped, so team names coming from the API are safe to embed.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from footyhub.client.prediction import PredictionResult
from footyhub.client.state import Team
from footyhub.config import FINISHED_STATUS, LIVE_STATUSES, TEMPLATES_DIR
from footyhub.data.schemas import Match, StandingsResponse

NO_LIVE_MATCHES = (
    "No live matches today. Check the league tabs for upcoming fixtures! ⚽"
)
NO_STANDINGS = "No standings available for this competition."
GENERIC_ERROR = "Could not load data from the football API. Please try again later."


@lru_cache(maxsize=1)
def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
    )


def _render(template_name: str, **context) -> str:
    return _get_env().get_template(template_name).render(**context)


def match_status_class(status: str) -> str:
    """CSS class for a match status: live, finished or scheduled."""
    if status in LIVE_STATUSES:
        return "live"
    if status == FINISHED_STATUS:
        return "finished"
    return "scheduled"


def match_status_text(match: Match) -> str:
    """Badge text: "LIVE 🔴" while in play, "FT" when finished, else kick-off."""
    if match.status == "IN_PLAY":
        return "LIVE 🔴"
    if match.status == FINISHED_STATUS:
        return "FT"
    return match.utc_date.strftime("%H:%M")


def format_match_date(match: Match) -> str:
    """Day and short month, e.g. "19 Oct"."""
    return f"{match.utc_date.day} {match.utc_date.strftime('%b')}"


def create_match_card(match: Match) -> str:
    competition_name = match.competition.name if match.competition else "Unknown League"
    return _render(
        "match_card.html",
        match=match,
        competition_name=competition_name,
        date_text=format_match_date(match),
        status_class=match_status_class(match.status),
        status_text=match_status_text(match),
    )


def create_match_cards(matches: Iterable[Match]) -> str:
    return "".join(create_match_card(m) for m in matches)


def create_standings_table(standings: StandingsResponse) -> str:
    """League table of the first standings group, or a notice if empty."""
    if not standings.standings:
        return error_banner(NO_STANDINGS)
    return _render("standings_table.html", table=standings.table)


def render_prediction(result: PredictionResult) -> str:
    return _render("prediction.html", result=result)


def render_team_options(
    teams: List[Team],
    placeholder: str,
    selected: Optional[int] = None,
) -> str:
    """`<option>` list for a team dropdown, keeping `selected` if present."""
    return _render(
        "team_options.html",
        teams=teams,
        placeholder=placeholder,
        selected=selected,
    )


def info_banner(message: str) -> str:
    return _render("banner.html", css_class="info-banner", message=message)


def error_banner(message: str = GENERIC_ERROR) -> str:
    return _render("banner.html", css_class="error", message=message)


def prediction_message(message: str) -> str:
    return _render("banner.html", css_class="pred-message", message=message)
