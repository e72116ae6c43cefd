"""Shared test fixtures."""

from dataclasses import dataclass, field

import httpx
import pytest

from art_gallery.adapters.harvard_client import MuseumApiClient
from art_gallery.config import Settings
from art_gallery.domain.artworks import Artwork, ArtworkCategory, ArtworkSubmission
from art_gallery.services.artworks import ArtworkService
from art_gallery.services.auth import AuthService
from art_gallery.services.museum import MuseumService
from art_gallery.services.storage import InMemoryStorageBackend, JsonKeyValueStore


@dataclass
class FakeMuseumApiClient(MuseumApiClient):
    """Fake museum client returning a fixed payload and counting calls."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "records": [
                {
                    "id": 101,
                    "title": "Water Lilies",
                    "people": [{"name": "Claude Monet"}],
                    "classification": "Paintings",
                    "dated": "1906",
                    "description": "Pond at Giverny",
                    "primaryimageurl": "https://nrs.harvard.edu/101.jpg",
                    "culture": "French",
                    "medium": "Oil on canvas",
                },
                {
                    "id": 102,
                    "title": "Untitled Study",
                    "classification": "Photographs",
                    "primaryimageurl": "https://nrs.harvard.edu/102.jpg",
                },
            ]
        }
    )
    calls: list[tuple[int, int]] = field(default_factory=list)

    async def fetch_objects(self, page: int, size: int) -> dict[str, object]:
        self.calls.append((page, size))
        return self.payload


@dataclass
class FailingMuseumApiClient(MuseumApiClient):
    """Museum client that always fails with a transport error."""

    calls: int = 0

    async def fetch_objects(self, page: int, size: int) -> dict[str, object]:
        self.calls += 1
        raise httpx.ConnectError("connection refused")


@dataclass
class ExplodingMuseumService(MuseumService):
    """Museum service raising an error it does not handle itself."""

    client: MuseumApiClient | None = None

    async def fetch_artworks(self, page: int = 1, page_size: int = 20) -> list[Artwork]:
        raise RuntimeError("unexpected")


def make_artwork(  # noqa: PLR0913
    artwork_id: str,
    *,
    title: str = "Artwork",
    artist: str = "Artist",
    description: str = "",
    category: ArtworkCategory = ArtworkCategory.PAINTING,
    year: int | None = None,
    tags: tuple[str, ...] = (),
    submitted_by: str | None = None,
) -> Artwork:
    """Build an artwork for tests; passing ``submitted_by`` marks it user-submitted."""
    return Artwork(
        id=artwork_id,
        title=title,
        artist=artist,
        description=description,
        category=category,
        image="https://example.com/image.jpg",
        tags=tags,
        year=year,
        is_user_submitted=submitted_by is not None,
        submitted_by=submitted_by,
        submitted_at="2024-01-01T00:00:00+00:00" if submitted_by else None,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory", harvard_api_key=None)


@pytest.fixture
def store() -> JsonKeyValueStore:
    return JsonKeyValueStore(InMemoryStorageBackend())


@pytest.fixture
def museum_client() -> FakeMuseumApiClient:
    return FakeMuseumApiClient()


@pytest.fixture
def artwork_service(
    store: JsonKeyValueStore, museum_client: FakeMuseumApiClient
) -> ArtworkService:
    return ArtworkService(store=store, museum_service=MuseumService(museum_client))


@pytest.fixture
def auth_service(store: JsonKeyValueStore) -> AuthService:
    return AuthService(store=store)


@pytest.fixture
def submission() -> ArtworkSubmission:
    return ArtworkSubmission(
        title="Morning Fog",
        artist="Ines Duarte",
        description="Harbor at dawn",
        category=ArtworkCategory.PHOTOGRAPHY,
        image="https://example.com/fog.jpg",
        tags=("harbor", "fog"),
        year=2024,
    )
