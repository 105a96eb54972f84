"""Application configuration models."""

from __future__ import annotations

from functools import lru_cache

import httpx
from pydantic import Field, HttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_PROVIDER_NAME = "ANIMEVIETSUB"


class Settings(BaseSettings):
    """Settings loaded from environment variables or a .env file."""

    app_name: str = Field(default="Hasukatsu Episodes", alias="APP_NAME")

    api_base_url: HttpUrl = Field(
        default="https://api.hasukatsu.site", alias="HASUKATSU_API_URL"
    )
    provider_name: str = Field(
        default=DEFAULT_PROVIDER_NAME, alias="HASUKATSU_PROVIDER"
    )

    episode_page_limit: int = Field(
        default=100, alias="EPISODE_PAGE_LIMIT", ge=1, le=500
    )
    search_limit: int = Field(default=20, alias="SEARCH_LIMIT", ge=1, le=100)

    request_timeout_seconds: float = Field(
        default=20.0, alias="REQUEST_TIMEOUT", gt=0
    )
    connect_timeout_seconds: float = Field(
        default=10.0, alias="CONNECT_TIMEOUT", gt=0
    )

    @field_validator("provider_name", mode="before")
    @classmethod
    def _normalise_provider_name(cls, value: object) -> str:
        """Upper-case the provider slug and fall back to the default when blank."""

        if value is None:
            return DEFAULT_PROVIDER_NAME
        cleaned = str(value).strip()
        if not cleaned:
            return DEFAULT_PROVIDER_NAME
        return cleaned.upper()

    @property
    def api_base(self) -> str:
        """Return the API base URL without a trailing slash."""

        return str(self.api_base_url).rstrip("/")

    @property
    def http_timeout(self) -> httpx.Timeout:
        return httpx.Timeout(
            self.request_timeout_seconds, connect=self.connect_timeout_seconds
        )

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()  # type: ignore[call-arg]


settings = get_settings()
