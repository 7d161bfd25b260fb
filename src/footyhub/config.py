"""
Global configuration for the FootyHub project.

This module centralizes the upstream API location, competition codes and the
prediction heuristic weights, so you can tweak them in one place. Values that
depend on the deployment (API key, ports) live in `footyhub.settings`.
"""

from pathlib import Path

# Package root = folder that contains "api", "client", "templates", etc.
PACKAGE_ROOT: Path = Path(__file__).resolve().parent
TEMPLATES_DIR: Path = PACKAGE_ROOT / "templates"

# Upstream sports-data API
FOOTBALL_API_BASE_URL: str = "https://api.football-data.org/v4"
AUTH_HEADER: str = "X-Auth-Token"

# Competitions
PREMIER_LEAGUE: str = "PL"
LA_LIGA: str = "PD"
DEFAULT_STANDINGS_CODE: str = PREMIER_LEAGUE
PRELOAD_COMPETITIONS = [PREMIER_LEAGUE, LA_LIGA]

# Competitions offered in the standings league selector (free tier)
STANDINGS_CHOICES = {
    "PL": "Premier League",
    "PD": "La Liga",
    "BL1": "Bundesliga",
    "SA": "Serie A",
    "FL1": "Ligue 1",
}

# Prediction heuristic
POINTS_WEIGHT: float = 0.6
GOAL_DIFFERENCE_WEIGHT: float = 0.35
HOME_ADVANTAGE: float = 5.0
DRAW_MARGIN: int = 10  # percentage points under which a match is "too close"
DRAW_LABEL: str = "Draw / Very Close Match"

# Match statuses
UPCOMING_STATUSES = ["SCHEDULED", "TIMED", "IN_PLAY"]
LIVE_STATUSES = ["IN_PLAY", "PAUSED"]
FINISHED_STATUS: str = "FINISHED"
UPCOMING_MATCHES_LIMIT: int = 8

# UI tabs
TAB_LIVE: str = "live"
TAB_STANDINGS: str = "standings"
TAB_PREMIER_LEAGUE: str = "premier-league"
TAB_LA_LIGA: str = "la-liga"
TAB_PREDICTOR: str = "predictor"
TABS = [TAB_LIVE, TAB_STANDINGS, TAB_PREMIER_LEAGUE, TAB_LA_LIGA, TAB_PREDICTOR]

# Tab -> competition code for the league-specific tabs
LEAGUE_TABS = {
    TAB_PREMIER_LEAGUE: PREMIER_LEAGUE,
    TAB_LA_LIGA: LA_LIGA,
}
