"""
HTTP client for the football-data.org v4 API.

Every call attaches the auth token and either returns decoded JSON or raises
`UpstreamError`. There are no retries.
"""

from __future__ import annotations

from typing import Any

import requests

from footyhub.config import AUTH_HEADER
from footyhub.errors import UpstreamError
from footyhub.settings import Settings, get_settings
from footyhub.utils.logging_utils import get_logger

logger = get_logger(__name__)


class FootballDataClient:
    """Thin wrapper around a `requests.Session` bound to the upstream API."""

    def __init__(
        self,
        base_url: str,
        api_key: str | None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        if api_key:
            self.session.headers[AUTH_HEADER] = api_key

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "FootballDataClient":
        settings = settings or get_settings()
        return cls(
            base_url=settings.football_api_base_url,
            api_key=settings.football_api_key,
            timeout=settings.http_timeout_seconds,
        )

    def get(self, endpoint: str) -> Any:
        """
        GET `{base_url}/{endpoint}` and return the decoded JSON body.

        Raises
        ------
        UpstreamError
            On connection errors, non-2xx responses and non-JSON bodies.
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        logger.info("Calling API: %s", url)

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("Error calling %s: %s", endpoint, exc)
            raise UpstreamError(f"Could not reach API: {exc}") from exc

        if not response.ok:
            logger.error("API Error: %s - %s", response.status_code, response.reason)
            raise UpstreamError(
                f"API returned {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as exc:
            logger.error("Error calling %s: response is not JSON", endpoint)
            raise UpstreamError("API returned invalid JSON") from exc

        logger.info("API Success: %s", endpoint)
        return data

    # Convenience wrappers, one per upstream resource

    def matches_today(self) -> Any:
        return self.get("matches")

    def competition_matches(self, competition_code: str) -> Any:
        return self.get(f"competitions/{competition_code}/matches")

    def competition_standings(self, competition_code: str) -> Any:
        return self.get(f"competitions/{competition_code}/standings")

    def team(self, team_id: int | str) -> Any:
        return self.get(f"teams/{team_id}")

    def match(self, match_id: int | str) -> Any:
        return self.get(f"matches/{match_id}")

    def competitions(self) -> Any:
        return self.get("competitions")
