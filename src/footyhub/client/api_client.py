"""
Client for the FootyHub relay (`/api/...`).
"""

from __future__ import annotations

from typing import Any, Dict

import requests

from footyhub.errors import FetchError
from footyhub.settings import Settings, get_settings
from footyhub.utils.logging_utils import get_logger

logger = get_logger(__name__)


class HubApiClient:
    """Fetch JSON from the relay, turning every failure into `FetchError`."""

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "HubApiClient":
        settings = settings or get_settings()
        return cls(settings.hub_api_url, timeout=settings.http_timeout_seconds)

    def fetch(self, endpoint: str) -> Dict[str, Any]:
        """
        GET `{base_url}/{endpoint}`.

        The relay answers failures with `{"error": ..., "message": ...}`; such
        an envelope is raised as `FetchError` just like a network failure.
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        try:
            response = self.session.get(url, timeout=self.timeout)
            data = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error("Fetch Error: %s: %s", url, exc)
            raise FetchError(str(exc)) from exc

        if not isinstance(data, dict):
            logger.error("Fetch Error: %s: unexpected payload", url)
            raise FetchError("API Error")
        if data.get("error"):
            logger.error("Fetch Error: %s: %s", url, data.get("message"))
            raise FetchError(data.get("message") or "API Error")
        return data
