"""Pydantic models describing Hasukatsu catalog payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils import first_text

SubOrDub = Literal["sub", "dub"]


class RawEpisodeEntry(BaseModel):
    """One episode entry as listed on a provider page."""

    model_config = ConfigDict(populate_by_name=True)

    episode_number_label: str = Field(default="", alias="episodeNumber")
    episode_identifier: str = Field(alias="episodeId")
    server_name: str | None = Field(default=None, alias="server")

    @field_validator("episode_number_label", mode="before")
    @classmethod
    def _coerce_label(cls, value: object) -> str:
        if value is None:
            return ""
        if isinstance(value, bool):
            raise TypeError("episodeNumber must be a string or number")
        if isinstance(value, (int, float)):
            if isinstance(value, float) and value.is_integer():
                return str(int(value))
            return str(value)
        return value  # type: ignore[return-value]

    @field_validator("episode_identifier", mode="before")
    @classmethod
    def _coerce_identifier(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("server_name", mode="before")
    @classmethod
    def _blank_server_is_missing(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class EpisodePage(BaseModel):
    """A single page returned by the ``/stream/episodes`` endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    provider: str | None = None
    limit: int | None = None
    offset: int | None = None
    total: int | None = None
    has_next_page: bool = Field(default=False, alias="hasNextPage")
    episodes: list[RawEpisodeEntry] = Field(default_factory=list)

    @field_validator("episodes", mode="before")
    @classmethod
    def _null_episodes_is_empty(cls, value: object) -> object:
        return [] if value is None else value

    @field_validator("has_next_page", mode="before")
    @classmethod
    def _null_flag_is_false(cls, value: object) -> object:
        return False if value is None else value

    def is_empty(self) -> bool:
        return not self.episodes


class SearchTitles(BaseModel):
    en: str | None = None
    ja: str | None = None
    vi: str | None = None


class SearchHit(BaseModel):
    """A media entry from the ``/search`` endpoint."""

    id: int
    media_type: str | None = Field(default=None, alias="mediaType")
    titles: SearchTitles = Field(default_factory=SearchTitles)
    status: str | None = None

    def display_title(self, fallback: str) -> str:
        """Prefer the English title, then Vietnamese, then Japanese."""

        return first_text(self.titles.en, self.titles.vi, self.titles.ja) or fallback


class SearchResponse(BaseModel):
    success: bool = False
    results: list[SearchHit] | None = None
    total: int | None = None
    has_next_page: bool = Field(default=False, alias="hasNextPage")


@dataclass(slots=True)
class SearchResult:
    """Media match handed back to the host for episode lookups."""

    id: str
    title: str
    url: str = ""
    sub_or_dub: SubOrDub = "sub"


@dataclass(slots=True)
class MediaHint:
    """Media already identified by the host, used to skip the search call."""

    id: int | None = None
    english_title: str | None = None
    romaji_title: str | None = None
