"""Merge paginated episode listings into one ordered, de-duplicated list."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from functools import cmp_to_key
from typing import AsyncIterator, Awaitable, Callable, Iterable

from ..errors import NotFoundError
from ..labels import is_end_marker, parse_label, part_number_key
from ..models import EpisodePage, RawEpisodeEntry
from ..utils import to_int32

logger = logging.getLogger(__name__)

DEFAULT_PAGE_LIMIT = 100

PageFetcher = Callable[[int, int], Awaitable[EpisodePage]]


@dataclass(frozen=True, slots=True)
class EpisodeRecord:
    """An episode ready to be handed to the host."""

    identifier: str
    display_title: str
    ordering_number: int
    canonical_key: str
    server_name: str | None = None
    media_id: int | None = None


def build_record(entry: RawEpisodeEntry, *, media_id: int | None = None) -> EpisodeRecord:
    """Turn a raw page entry into an :class:`EpisodeRecord`."""

    parsed = parse_label(entry.episode_number_label)
    return EpisodeRecord(
        identifier=entry.episode_identifier,
        display_title=parsed.display_title,
        ordering_number=parsed.base_number,
        canonical_key=parsed.raw_label or str(parsed.base_number),
        server_name=entry.server_name,
        media_id=media_id,
    )


def deduplicate(records: Iterable[EpisodeRecord]) -> list[EpisodeRecord]:
    """Keep the first record seen for every canonical key."""

    seen: dict[str, EpisodeRecord] = {}
    for record in records:
        if record.canonical_key not in seen:
            seen[record.canonical_key] = record
    return list(seen.values())


def _compare_text(left: str, right: str) -> int:
    return (left > right) - (left < right)


def compare_records(a: EpisodeRecord, b: EpisodeRecord) -> int:
    """Order records by number, then plain < part < range < end marker.

    Within one episode number a plain key ("12") sorts first, then numbered
    parts ("12_2") by part number, then ranges ("12-13") lexically, then
    underscore keys without a part number such as "12_END". Remaining ties
    fall back to the server name and finally the key itself.
    """

    if a.ordering_number != b.ordering_number:
        return -1 if a.ordering_number < b.ordering_number else 1

    a_key, b_key = a.canonical_key, b.canonical_key
    a_underscore, a_dash = "_" in a_key, "-" in a_key
    b_underscore, b_dash = "_" in b_key, "-" in b_key
    a_plain = not (a_underscore or a_dash)
    b_plain = not (b_underscore or b_dash)

    if a_plain != b_plain:
        return -1 if a_plain else 1

    if not a_plain:
        a_suffix = part_number_key(a_key) if a_underscore else None
        b_suffix = part_number_key(b_key) if b_underscore else None
        a_part = a_suffix if not a_dash else None
        b_part = b_suffix if not b_dash else None
        # Underscore keys with no "_<digits>" anywhere, e.g. "12_END".
        a_loose = a_underscore and a_suffix is None
        b_loose = b_underscore and b_suffix is None

        if a_part is not None and b_part is not None:
            if a_part != b_part:
                return -1 if a_part < b_part else 1
        elif a_part is not None and (b_dash or b_loose):
            return -1
        elif b_part is not None and (a_dash or a_loose):
            return 1

        if a_dash and b_dash:
            result = _compare_text(a_key, b_key)
            if result:
                return result
        elif a_dash and b_loose:
            return -1
        elif b_dash and a_loose:
            return 1

    a_end, b_end = is_end_marker(a_key), is_end_marker(b_key)
    if a_end != b_end:
        return 1 if a_end else -1

    a_server, b_server = a.server_name or "", b.server_name or ""
    if a_server != b_server:
        return _compare_text(a_server, b_server)

    return _compare_text(a_key, b_key)


def sort_records(records: Iterable[EpisodeRecord]) -> list[EpisodeRecord]:
    return sorted(records, key=cmp_to_key(compare_records))


def aggregate(
    pages: Iterable[EpisodePage], *, media_id: int | None = None
) -> list[EpisodeRecord]:
    """Build the final episode list from pages in the order they were fetched.

    Consumption stops at the first empty page or after the first page that
    reports no further pages. Raises :class:`NotFoundError` when no episode
    survives.
    """

    collected: list[EpisodeRecord] = []
    for page in pages:
        if page.is_empty():
            break
        collected.extend(
            build_record(entry, media_id=media_id) for entry in page.episodes
        )
        if not page.has_next_page:
            break

    if not collected:
        raise NotFoundError("No episodes found.", media_id=media_id)

    unique = deduplicate(collected)
    ordered = [
        replace(record, ordering_number=to_int32(record.ordering_number))
        for record in sort_records(unique)
    ]
    logger.info(
        "Aggregated %s episode entries into %s episodes for media %s",
        len(collected),
        len(ordered),
        media_id,
    )
    return ordered


async def iter_pages(
    fetch_page: PageFetcher, *, limit: int = DEFAULT_PAGE_LIMIT
) -> AsyncIterator[EpisodePage]:
    """Yield pages one request at a time until the listing is exhausted."""

    offset = 0
    while True:
        logger.debug("Requesting episode page at offset %s (limit %s)", offset, limit)
        page = await fetch_page(offset, limit)
        if page.is_empty():
            return
        yield page
        if not page.has_next_page:
            return
        offset += limit


async def aggregate_episodes(
    fetch_page: PageFetcher,
    *,
    limit: int = DEFAULT_PAGE_LIMIT,
    media_id: int | None = None,
) -> list[EpisodeRecord]:
    """Page through ``fetch_page`` and aggregate everything it returns.

    Errors raised by ``fetch_page`` propagate unchanged and stop paging.
    """

    pages = [page async for page in iter_pages(fetch_page, limit=limit)]
    return aggregate(pages, media_id=media_id)
