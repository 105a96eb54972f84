"""Configuration settings behaviour tests."""

from __future__ import annotations

import httpx
import pytest

from hasukatsu.config import DEFAULT_PROVIDER_NAME, Settings


def test_defaults_match_catalog_api() -> None:
    """Out of the box the provider talks to the public Hasukatsu API."""

    settings = Settings(_env_file=None)

    assert settings.api_base == "https://api.hasukatsu.site"
    assert settings.provider_name == DEFAULT_PROVIDER_NAME
    assert settings.episode_page_limit == 100
    assert settings.search_limit == 20


def test_provider_name_is_upper_cased() -> None:
    settings = Settings(_env_file=None, HASUKATSU_PROVIDER=" animevietsub ")

    assert settings.provider_name == "ANIMEVIETSUB"


def test_blank_provider_name_falls_back_to_default() -> None:
    settings = Settings(_env_file=None, HASUKATSU_PROVIDER="   ")

    assert settings.provider_name == DEFAULT_PROVIDER_NAME


def test_api_base_strips_trailing_slash() -> None:
    settings = Settings(_env_file=None, HASUKATSU_API_URL="https://mirror.example.com/api/")

    assert settings.api_base == "https://mirror.example.com/api"


def test_http_timeout_uses_configured_values() -> None:
    settings = Settings(_env_file=None, REQUEST_TIMEOUT=5, CONNECT_TIMEOUT=2)

    timeout = settings.http_timeout

    assert isinstance(timeout, httpx.Timeout)
    assert timeout.read == 5
    assert timeout.connect == 2


def test_page_limit_out_of_range_raises() -> None:
    """Page sizes beyond what the API serves are rejected."""

    with pytest.raises(ValueError):
        Settings(_env_file=None, EPISODE_PAGE_LIMIT=0)
