"""Client for the Hasukatsu catalog API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import httpx
from pydantic import ValidationError

from ..config import Settings
from ..errors import InvalidInputError, NotFoundError, UpstreamError
from ..models import EpisodePage, MediaHint, SearchResponse, SearchResult
from ..utils import first_text, parse_leading_int
from .aggregator import EpisodeRecord, aggregate_episodes

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = frozenset({"MAPPING_NOT_FOUND", "EPISODES_NOT_FOUND"})


class HasukatsuClient:
    """Thin wrapper around the Hasukatsu search and episode endpoints."""

    _SEARCH_PATH = "/search"
    _EPISODES_PATH = "/stream/episodes"

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient):
        self._settings = settings
        self._client = http_client

    @classmethod
    @asynccontextmanager
    async def connect(
        cls, settings: Settings, **client_kwargs: Any
    ) -> AsyncIterator["HasukatsuClient"]:
        """Yield a client backed by its own configured ``httpx.AsyncClient``.

        Extra keyword arguments are passed to ``httpx.AsyncClient``.
        """

        client_kwargs.setdefault("timeout", settings.http_timeout)
        headers = {"User-Agent": f"{settings.app_name} (hasukatsu)"}
        headers.update(client_kwargs.pop("headers", None) or {})
        async with httpx.AsyncClient(headers=headers, **client_kwargs) as http_client:
            yield cls(settings, http_client)

    def _url(self, path: str) -> str:
        return f"{self._settings.api_base}{path}"

    async def search(
        self, query: str, *, media: MediaHint | None = None
    ) -> list[SearchResult]:
        """Search the catalog by title.

        When the host already knows the AniList id the catalog uses it
        directly, so no request is made. Failures degrade to an empty list.
        """

        if media is not None and media.id:
            title = first_text(media.english_title, media.romaji_title) or query
            return [SearchResult(id=str(media.id), title=title)]

        params = {"title": query, "limit": self._settings.search_limit}
        try:
            response = await self._client.get(
                self._url(self._SEARCH_PATH), params=params
            )
        except httpx.HTTPError as exc:
            logger.warning("Hasukatsu search failed for %r: %s", query, exc)
            return []

        if not response.is_success:
            logger.warning(
                "Hasukatsu search failed: %s %s",
                response.status_code,
                response.reason_phrase,
            )
            return []

        try:
            payload = SearchResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logger.warning("Unexpected Hasukatsu search payload for %r: %s", query, exc)
            return []

        if not payload.success or not payload.results:
            return []

        return [
            SearchResult(id=str(hit.id), title=hit.display_title(query))
            for hit in payload.results
        ]

    async def fetch_episode_page(
        self, media_id: int, *, offset: int, limit: int
    ) -> EpisodePage:
        """Fetch one page of the provider's episode listing."""

        params = {
            "id": media_id,
            "provider": self._settings.provider_name,
            "limit": limit,
            "offset": offset,
        }
        try:
            response = await self._client.get(
                self._url(self._EPISODES_PATH), params=params
            )
        except httpx.HTTPError as exc:
            logger.warning(
                "Transport error fetching episodes for %s at offset %s: %s",
                media_id,
                offset,
                exc,
            )
            raise UpstreamError(str(exc) or exc.__class__.__name__) from exc

        if not response.is_success:
            if response.status_code == 404:
                code = self._error_code(response)
                if code in NOT_FOUND_CODES:
                    raise NotFoundError(
                        f"No episodes found for media ID: {media_id}",
                        media_id=media_id,
                        code=code,
                    )
            logger.warning(
                "Failed to fetch episodes for %s: %s %s",
                media_id,
                response.status_code,
                response.reason_phrase,
            )
            raise UpstreamError(
                response.reason_phrase, status_code=response.status_code
            )

        try:
            return EpisodePage.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logger.warning("Unexpected episode payload for %s: %s", media_id, exc)
            raise UpstreamError(
                "Malformed episode payload", status_code=response.status_code
            ) from exc

    async def find_episodes(self, media_id: str | int) -> list[EpisodeRecord]:
        """Return every episode of ``media_id`` in playback order."""

        resolved_id = parse_leading_int(media_id)
        if resolved_id is None:
            raise InvalidInputError(f"Invalid media ID: {media_id}")

        async def fetch_page(offset: int, limit: int) -> EpisodePage:
            return await self.fetch_episode_page(resolved_id, offset=offset, limit=limit)

        return await aggregate_episodes(
            fetch_page,
            limit=self._settings.episode_page_limit,
            media_id=resolved_id,
        )

    @staticmethod
    def _error_code(response: httpx.Response) -> str | None:
        try:
            payload: Any = response.json()
        except ValueError:
            return None
        if not isinstance(payload, dict):
            return None
        code = payload.get("code")
        return code if isinstance(code, str) else None
