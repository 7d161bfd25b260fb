# path: src/footyhub/api/main.py
"""
FastAPI app relaying football-data.org endpoints to the FootyHub frontend.

Endpoints:
- GET /health                          -> simple health check
- GET /api/matches/today               -> upstream "matches"
- GET /api/matches/{competition_code}  -> upstream "competitions/{code}/matches"
- GET /api/standings/{competition_code}-> upstream "competitions/{code}/standings"
- GET /api/team/{team_id}              -> upstream "teams/{id}"
- GET /api/match/{match_id}            -> upstream "matches/{id}"
- GET /api/competitions                -> upstream "competitions"

Every failure is answered with status 500 and {"error": ..., "message": ...}.

Usage (from project root):

    python -m footyhub.api.main --port 3000
"""

from __future__ import annotations

import argparse
from typing import Any, Callable, Dict

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from footyhub import __version__
from footyhub.api.upstream import FootballDataClient
from footyhub.data.schemas import ensure_object, parse_matches, parse_standings
from footyhub.errors import FootyHubError
from footyhub.settings import get_settings
from footyhub.utils.logging_utils import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="FootyHub API",
    version=__version__,
    description="Football-data.org relay for the FootyHub frontend",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Global state populated on first use
UPSTREAM_CLIENT: FootballDataClient | None = None


def get_upstream_client() -> FootballDataClient:
    """Return the process-wide upstream client, creating it on first use."""
    global UPSTREAM_CLIENT
    if UPSTREAM_CLIENT is None:
        UPSTREAM_CLIENT = FootballDataClient.from_settings()
    return UPSTREAM_CLIENT


@app.on_event("startup")
def startup_event() -> None:
    """Report whether an API key is configured."""
    settings = get_settings()
    logger.info("FootyHub relay targeting %s", settings.football_api_base_url)
    if settings.football_api_key:
        logger.info("API key loaded: yes")
    else:
        logger.warning("API key loaded: no (set FOOTBALL_API_KEY)")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(status_code=500, content={"error": "Something went wrong!"})


def _relay(
    fetch: Callable[[], Any],
    error: str,
    validate: Callable[[Any], Any] = ensure_object,
) -> Any:
    """
    Run an upstream fetch, validate the payload and relay it unchanged.

    Any FootyHubError becomes the generic 500 error envelope.
    """
    try:
        data = fetch()
        validate(data)
    except FootyHubError as exc:
        logger.error("%s: %s", error, exc)
        return JSONResponse(
            status_code=500, content={"error": error, "message": str(exc)}
        )
    return data


@app.get("/health")
def health() -> Dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/api/matches/today")
def matches_today(client: FootballDataClient = Depends(get_upstream_client)) -> Any:
    """Today's matches across all competitions available to the token."""
    return _relay(client.matches_today, "Failed to fetch matches", parse_matches)


@app.get("/api/matches/{competition_code}")
def competition_matches(
    competition_code: str,
    client: FootballDataClient = Depends(get_upstream_client),
) -> Any:
    return _relay(
        lambda: client.competition_matches(competition_code),
        "Failed to fetch matches",
        parse_matches,
    )


@app.get("/api/standings/{competition_code}")
def competition_standings(
    competition_code: str,
    client: FootballDataClient = Depends(get_upstream_client),
) -> Any:
    return _relay(
        lambda: client.competition_standings(competition_code),
        "Failed to fetch standings",
        parse_standings,
    )


@app.get("/api/team/{team_id}")
def team(team_id: str, client: FootballDataClient = Depends(get_upstream_client)) -> Any:
    return _relay(lambda: client.team(team_id), "Failed to fetch team data")


@app.get("/api/match/{match_id}")
def match(match_id: str, client: FootballDataClient = Depends(get_upstream_client)) -> Any:
    """Single match, including head-to-head aggregates when the API has them."""
    return _relay(lambda: client.match(match_id), "Failed to fetch match data")


@app.get("/api/competitions")
def competitions(client: FootballDataClient = Depends(get_upstream_client)) -> Any:
    return _relay(client.competitions, "Failed to fetch competitions")


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Run the FootyHub API relay.")
    parser.add_argument("--host", default=settings.host, help="Bind address.")
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help="Port to listen on. Defaults to the PORT setting (3000).",
    )
    args = parser.parse_args()

    logger.info("FootyHub running on http://%s:%d", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
