"""Tests for search, category filtering and sorting."""

import asyncio

from art_gallery.domain.artworks import ArtworkCategory, artwork_to_dict
from art_gallery.services.artworks import (
    ArtworkService,
    filter_by_category,
    search_artworks,
    sort_artworks,
)
from art_gallery.services.museum import MuseumService
from art_gallery.services.storage import ARTWORKS_KEY, JsonKeyValueStore
from tests.conftest import FakeMuseumApiClient, make_artwork

ARTWORKS = [
    make_artwork("a", title="Harbor", artist="Zoe", year=1990),
    make_artwork("b", title="Meadow", artist="adam", year=None),
    make_artwork("c", title="Tower", artist="Émile", year=1990, tags=("Gothic",)),
    make_artwork(
        "d",
        title="Circuit",
        artist="Bo",
        year=2020,
        category=ArtworkCategory.DIGITAL,
        submitted_by="u1",
    ),
    make_artwork(
        "e",
        title="Dunes",
        artist="Cy",
        description="Desert light",
        year=None,
        submitted_by="u2",
    ),
]


def _ids(artworks) -> list[str]:  # type: ignore[no-untyped-def]
    return [artwork.id for artwork in artworks]


def test_newest_sorts_descending_with_missing_year_last_and_stable_ties() -> None:
    assert _ids(sort_artworks(ARTWORKS, "newest")) == ["d", "a", "c", "b", "e"]


def test_oldest_sorts_ascending_with_missing_year_first() -> None:
    assert _ids(sort_artworks(ARTWORKS, "oldest")) == ["b", "e", "a", "c", "d"]


def test_artist_sort_ignores_case_and_accents() -> None:
    assert _ids(sort_artworks(ARTWORKS, "artist")) == ["b", "d", "e", "c", "a"]


def test_popular_puts_user_submissions_first() -> None:
    assert _ids(sort_artworks(ARTWORKS, "popular")) == ["d", "e", "a", "c", "b"]


def test_unknown_sort_keeps_order() -> None:
    assert _ids(sort_artworks(ARTWORKS, "random")) == ["a", "b", "c", "d", "e"]


def test_search_is_case_insensitive_across_fields() -> None:
    assert _ids(search_artworks(ARTWORKS, "HARB")) == ["a"]
    assert _ids(search_artworks(ARTWORKS, "émile")) == ["c"]
    assert _ids(search_artworks(ARTWORKS, "desert")) == ["e"]
    assert _ids(search_artworks(ARTWORKS, "gothic")) == ["c"]


def test_blank_search_is_noop() -> None:
    assert _ids(search_artworks(ARTWORKS, "   ")) == _ids(ARTWORKS)
    assert _ids(search_artworks(ARTWORKS, None)) == _ids(ARTWORKS)


def test_category_filter_is_exact() -> None:
    assert _ids(filter_by_category(ARTWORKS, "digital")) == ["d"]
    assert _ids(filter_by_category(ARTWORKS, "all")) == _ids(ARTWORKS)
    assert filter_by_category(ARTWORKS, "Digital") == []


def test_filtered_artworks_runs_full_pipeline(store: JsonKeyValueStore) -> None:
    user_artworks = [a for a in ARTWORKS if a.is_user_submitted]
    store.set(ARTWORKS_KEY, [artwork_to_dict(a) for a in user_artworks])
    service = ArtworkService(
        store=store, museum_service=MuseumService(FakeMuseumApiClient())
    )

    everything = asyncio.run(service.get_filtered_artworks())
    paintings = asyncio.run(
        service.get_filtered_artworks("painting", "oldest", "light")
    )
    popular = asyncio.run(service.get_filtered_artworks("all", "popular"))

    assert _ids(everything) == ["d", "harvard_101", "harvard_102", "e"]
    assert _ids(paintings) == ["e"]
    assert _ids(popular) == ["d", "e", "harvard_101", "harvard_102"]


def test_filtered_artworks_with_fallback_data(store: JsonKeyValueStore) -> None:
    service = ArtworkService(store=store, museum_service=MuseumService(client=None))

    paintings = asyncio.run(service.get_filtered_artworks("painting", "newest"))
    urban = asyncio.run(service.get_filtered_artworks(search_query="Urban"))

    assert _ids(paintings) == ["fallback_5", "fallback_1"]
    assert _ids(urban) == ["fallback_2", "fallback_6"]


def test_artist_sort_puts_lowercase_first_on_ties() -> None:
    artworks = [
        make_artwork("upper", artist="Ana"),
        make_artwork("lower", artist="ana"),
        make_artwork("other", artist="Álvaro"),
    ]

    assert _ids(sort_artworks(artworks, "artist")) == ["other", "lower", "upper"]
