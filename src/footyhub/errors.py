"""
Exception types shared by the proxy relay and the client view-model.
"""

from __future__ import annotations


class FootyHubError(Exception):
    """Base class for all FootyHub errors."""


class UpstreamError(FootyHubError):
    """The remote sports-data API could not be reached or answered badly."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedPayloadError(FootyHubError, ValueError):
    """A JSON payload did not match the expected structure."""


class FetchError(FootyHubError):
    """A client-side call to the proxy failed, whatever the underlying cause."""


class InvalidSelection(FootyHubError, ValueError):
    """The two teams picked for a prediction are missing, unknown or equal."""
