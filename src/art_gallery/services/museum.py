"""Museum catalog service mapping Harvard records onto gallery artworks."""

import asyncio
import logging
import re
from dataclasses import dataclass

import httpx

from art_gallery.adapters.harvard_client import MuseumApiClient
from art_gallery.domain.artworks import Artwork, ArtworkCategory
from art_gallery.domain.museum import MuseumPage, MuseumRecord
from art_gallery.services.fallback_artworks import FALLBACK_ARTWORKS

SOURCE_PREFIX = "harvard_"
UNTITLED = "Untitled"
UNKNOWN_ARTIST = "Unknown Artist"
DEFAULT_DESCRIPTION = "A beautiful artwork from the Harvard Art Museums collection."
MEDIUM_TAG = "traditional-medium"
COLLECTION_TAGS = ("museum-collection", "harvard")

# Ordered: the first matching substring wins.
_CLASSIFICATION_CATEGORIES = (
    ("painting", ArtworkCategory.PAINTING),
    ("photograph", ArtworkCategory.PHOTOGRAPHY),
    ("sculpture", ArtworkCategory.SCULPTURE),
    ("digital", ArtworkCategory.DIGITAL),
)
_YEAR_PATTERN = re.compile(r"\b(1[5-9]\d{2}|20[0-2]\d)\b")
_WHITESPACE = re.compile(r"\s+")

_logger = logging.getLogger(__name__)


@dataclass
class MuseumService:
    """Fetch museum artworks, degrading to the built-in list on any failure.

    ``client`` is ``None`` when no API key is configured.
    """

    client: MuseumApiClient | None
    retry_attempts: int = 0
    retry_delay_seconds: float = 0.3

    async def fetch_artworks(self, page: int = 1, page_size: int = 20) -> list[Artwork]:
        """Return a page of canonical artworks or the fallback list."""
        if self.client is None:
            _logger.warning("Museum API key not provided, using fallback artworks")
            return list(FALLBACK_ARTWORKS)

        try:
            payload = await self._fetch_with_retry(page, page_size)
            museum_page = MuseumPage.model_validate(payload)
        except (httpx.HTTPError, ValueError) as exc:
            _logger.warning(
                "Museum API fetch failed (status=%s): %s",
                _status_code_from_exception(exc),
                exc,
            )
            return list(FALLBACK_ARTWORKS)

        artworks = transform_records(museum_page.records or [])
        _logger.info(
            "Museum API page=%s size=%s artworks=%s", page, page_size, len(artworks)
        )
        return artworks

    async def _fetch_with_retry(self, page: int, page_size: int) -> dict[str, object]:
        """Fetch a page with a short retry."""
        attempt = 0
        while True:
            try:
                return await self.client.fetch_objects(page=page, size=page_size)
            except httpx.HTTPError as exc:
                attempt += 1
                if attempt > self.retry_attempts:
                    raise
                _logger.info(
                    "Retrying museum fetch (attempt %s/%s): %s",
                    attempt,
                    self.retry_attempts + 1,
                    exc,
                )
                await asyncio.sleep(self.retry_delay_seconds)


def transform_records(records: list[MuseumRecord]) -> list[Artwork]:
    """Map museum records to artworks, dropping records without an image or id."""
    artworks: list[Artwork] = []
    for record in records:
        artwork = transform_record(record)
        if artwork is not None:
            artworks.append(artwork)
    return artworks


def transform_record(record: MuseumRecord) -> Artwork | None:
    """Map a single museum record to an artwork."""
    if not record.primaryimageurl or record.id is None:
        return None
    return Artwork(
        id=f"{SOURCE_PREFIX}{record.id}",
        title=record.title or UNTITLED,
        artist=_first_person_name(record) or UNKNOWN_ARTIST,
        description=record.description or DEFAULT_DESCRIPTION,
        category=map_classification_to_category(record.classification),
        year=extract_year(record.dated),
        image=record.primaryimageurl,
        tags=generate_tags(record),
        is_user_submitted=False,
    )


def map_classification_to_category(classification: str | None) -> ArtworkCategory:
    """Derive a gallery category from a museum classification."""
    if not classification:
        return ArtworkCategory.OTHER
    lowered = classification.lower()
    for needle, category in _CLASSIFICATION_CATEGORIES:
        if needle in lowered:
            return category
    return ArtworkCategory.OTHER


def extract_year(dated: str | None) -> int | None:
    """Return the first plausible year (1500-2029) in free-text date."""
    if not dated:
        return None
    match = _YEAR_PATTERN.search(dated)
    return int(match.group(0)) if match else None


def generate_tags(record: MuseumRecord) -> tuple[str, ...]:
    """Build tags from classification, culture and medium."""
    tags: list[str] = []
    if record.classification:
        tags.append(_normalize_tag(record.classification))
    if record.culture:
        tags.append(_normalize_tag(record.culture))
    if record.medium:
        tags.append(MEDIUM_TAG)
    tags.extend(COLLECTION_TAGS)
    return tuple(tags)


def _normalize_tag(value: str) -> str:
    return _WHITESPACE.sub("-", value.lower())


def _first_person_name(record: MuseumRecord) -> str | None:
    if not record.people:
        return None
    return record.people[0].name


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
