"""
Deployment settings for FootyHub, loaded from environment variables or `.env`.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from footyhub.config import FOOTBALL_API_BASE_URL


class Settings(BaseSettings):
    """Application settings for both the proxy server and the UI client."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    football_api_key: str | None = Field(
        default=None,
        description="football-data.org token sent as X-Auth-Token.",
    )
    football_api_base_url: str = Field(
        default=FOOTBALL_API_BASE_URL,
        min_length=8,
        description="Base URL of the upstream sports-data API.",
    )

    host: str = Field(default="127.0.0.1", description="Proxy bind address.")
    port: int = Field(default=3000, ge=1, le=65535, description="Proxy port.")

    hub_api_url: str = Field(
        default="http://localhost:3000/api",
        min_length=8,
        description="Proxy base URL used by the UI client.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds. Unset waits indefinitely.",
    )

    log_level: str = Field(default="INFO", description="Root logging level.")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()
