import pytest
from pydantic import ValidationError

from hasukatsu.models import EpisodePage, RawEpisodeEntry, SearchHit


def test_episode_page_parses_camel_case_payload():
    page = EpisodePage.model_validate(
        {
            "provider": "ANIMEVIETSUB",
            "limit": 100,
            "offset": 0,
            "total": 2,
            "hasNextPage": True,
            "episodes": [
                {"episodeNumber": "1", "episodeId": "abc", "server": "AnimeVsub"},
                {"episodeNumber": "2", "episodeId": "def"},
            ],
        }
    )

    assert page.has_next_page is True
    assert [entry.episode_identifier for entry in page.episodes] == ["abc", "def"]
    assert page.episodes[0].server_name == "AnimeVsub"
    assert page.episodes[1].server_name is None


def test_episode_page_treats_missing_fields_as_exhausted():
    page = EpisodePage.model_validate({"episodes": None, "hasNextPage": None})

    assert page.episodes == []
    assert page.has_next_page is False
    assert page.is_empty()


def test_raw_entry_defaults_label_and_server():
    entry = RawEpisodeEntry.model_validate(
        {"episodeNumber": None, "episodeId": "x", "server": "  "}
    )

    assert entry.episode_number_label == ""
    assert entry.server_name is None


def test_raw_entry_accepts_numeric_labels_and_ids():
    entry = RawEpisodeEntry.model_validate({"episodeNumber": 12, "episodeId": 99})

    assert entry.episode_number_label == "12"
    assert entry.episode_identifier == "99"


def test_raw_entry_requires_identifier():
    with pytest.raises(ValidationError):
        RawEpisodeEntry.model_validate({"episodeNumber": "1"})


def test_search_hit_title_preference():
    hit = SearchHit.model_validate(
        {"id": 1, "titles": {"ja": "Sousou no Frieren", "vi": "Frieren: Pháp sư tiễn táng"}}
    )

    assert hit.display_title("frieren") == "Frieren: Pháp sư tiễn táng"
    assert SearchHit.model_validate({"id": 2}).display_title("frieren") == "frieren"
