"""Artwork repository merging museum and user-submitted artworks."""

import asyncio
import logging
import unicodedata
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from art_gallery.domain.artworks import (
    Artwork,
    ArtworkSubmission,
    artwork_from_dict,
    artwork_to_dict,
    build_submitted_artwork,
    parse_tags,
)
from art_gallery.services.ids import TimestampIdGenerator
from art_gallery.services.museum import MuseumService
from art_gallery.services.storage import ARTWORKS_KEY, DRAFTS_KEY, JsonKeyValueStore

ALL_CATEGORIES = "all"

_logger = logging.getLogger(__name__)


@dataclass
class ArtworkService:
    """Owns the in-memory artwork lists and persists user submissions.

    Museum artworks are fetched once per instance; call ``refresh`` to reload.
    Stored submissions are read on first use by any operation. Stored rows
    that cannot be parsed are kept and written back unchanged.
    """

    store: JsonKeyValueStore
    museum_service: MuseumService
    museum_page: int = 1
    museum_page_size: int = 20
    ids: TimestampIdGenerator = field(default_factory=TimestampIdGenerator)
    _museum_artworks: list[Artwork] = field(default_factory=list, init=False)
    _user_artworks: list[Artwork] = field(default_factory=list, init=False)
    _unparsed_rows: list[object] = field(default_factory=list, init=False)
    _user_artworks_loaded: bool = field(default=False, init=False)
    _loaded: bool = field(default=False, init=False)
    _load_lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False)

    @property
    def is_loaded(self) -> bool:
        """Return True once initialization has completed."""
        return self._loaded

    async def initialize(self) -> None:
        """Load stored submissions and fetch museum artworks, once."""
        if self._loaded:
            return
        async with self._load_lock:
            if self._loaded:
                return
            self._ensure_user_artworks()
            try:
                self._museum_artworks = await self.museum_service.fetch_artworks(
                    page=self.museum_page, page_size=self.museum_page_size
                )
            except Exception:
                _logger.exception("Failed to load museum artworks")
                self._museum_artworks = []
            self._loaded = True

    async def refresh(self) -> None:
        """Discard loaded state and initialize again."""
        self._loaded = False
        self._user_artworks_loaded = False
        await self.initialize()

    async def get_all_artworks(self) -> list[Artwork]:
        """Return museum artworks followed by user submissions."""
        await self.initialize()
        return [*self._museum_artworks, *self._user_artworks]

    async def get_filtered_artworks(
        self,
        category: str = ALL_CATEGORIES,
        sort: str = "newest",
        search_query: str | None = None,
    ) -> list[Artwork]:
        """Search, filter by category, then sort."""
        artworks = await self.get_all_artworks()
        artworks = search_artworks(artworks, search_query)
        artworks = filter_by_category(artworks, category)
        return sort_artworks(artworks, sort)

    def submit_artwork(self, submission: ArtworkSubmission, user_id: str) -> Artwork:
        """Store a new user-submitted artwork and clear the user's draft."""
        self._ensure_user_artworks()
        artwork = build_submitted_artwork(
            submission,
            artwork_id=self.ids.next_id(),
            user_id=user_id,
            submitted_at=datetime.now(tz=UTC).isoformat(),
        )
        self._user_artworks.append(artwork)
        self._persist_user_artworks()
        self.clear_draft(user_id)
        _logger.info("Artwork submitted id=%s user=%s", artwork.id, user_id)
        return artwork

    def get_user_artworks(self, user_id: str) -> list[Artwork]:
        """Return artworks submitted by a user."""
        self._ensure_user_artworks()
        return [a for a in self._user_artworks if a.submitted_by == user_id]

    def count_user_artworks(self, user_id: str) -> int:
        """Return how many artworks a user has submitted."""
        return len(self.get_user_artworks(user_id))

    def get_artwork_by_id(self, artwork_id: str) -> Artwork | None:
        """Return an artwork by id, museum artworks first."""
        self._ensure_user_artworks()
        for artwork in [*self._museum_artworks, *self._user_artworks]:
            if artwork.id == artwork_id:
                return artwork
        return None

    def delete_user_artwork(self, artwork_id: str, user_id: str) -> bool:
        """Delete an artwork owned by the user; return False when nothing matched."""
        self._ensure_user_artworks()
        for index, artwork in enumerate(self._user_artworks):
            if artwork.id == artwork_id and artwork.submitted_by == user_id:
                del self._user_artworks[index]
                self._persist_user_artworks()
                return True
        return False

    def save_draft(self, draft: dict[str, object], user_id: str) -> None:
        """Store a user's draft, replacing any previous one.

        Tags given as comma-separated text are stored as a list.
        """
        if isinstance(draft.get("tags"), str):
            draft = {**draft, "tags": list(parse_tags(draft["tags"]))}
        drafts = self._load_drafts()
        drafts[user_id] = draft
        self.store.set(DRAFTS_KEY, drafts)

    def load_draft(self, user_id: str) -> dict[str, object] | None:
        """Return a user's draft, if one was saved."""
        return self._load_drafts().get(user_id)

    def clear_draft(self, user_id: str) -> None:
        """Delete a user's draft."""
        drafts = self._load_drafts()
        if drafts.pop(user_id, None) is not None:
            self.store.set(DRAFTS_KEY, drafts)

    def _load_drafts(self) -> dict[str, dict[str, object]]:
        drafts = self.store.get(DRAFTS_KEY, {})
        return drafts if isinstance(drafts, dict) else {}

    def _ensure_user_artworks(self) -> None:
        """Read stored submissions the first time they are needed."""
        if self._user_artworks_loaded:
            return
        rows = self.store.get(ARTWORKS_KEY, [])
        self._user_artworks = []
        self._unparsed_rows = []
        for row in rows if isinstance(rows, list) else []:
            try:
                self._user_artworks.append(artwork_from_dict(row))
            except (KeyError, TypeError, ValueError):
                _logger.warning("Keeping unparsed stored artwork as-is")
                self._unparsed_rows.append(row)
        self._user_artworks_loaded = True

    def _persist_user_artworks(self) -> None:
        self.store.set(
            ARTWORKS_KEY,
            [
                *self._unparsed_rows,
                *(artwork_to_dict(artwork) for artwork in self._user_artworks),
            ],
        )


def search_artworks(
    artworks: Iterable[Artwork], search_query: str | None
) -> list[Artwork]:
    """Keep artworks whose title, artist, description or tags contain the query."""
    if not search_query or not search_query.strip():
        return list(artworks)
    query = search_query.lower()
    return [artwork for artwork in artworks if artwork.matches(query)]


def filter_by_category(artworks: Iterable[Artwork], category: str) -> list[Artwork]:
    """Keep artworks in a category; ``all`` keeps everything."""
    if category == ALL_CATEGORIES:
        return list(artworks)
    return [artwork for artwork in artworks if artwork.category.value == category]


def sort_artworks(artworks: Iterable[Artwork], sort: str) -> list[Artwork]:
    """Order artworks; unknown sort keys keep the incoming order."""
    items = list(artworks)
    if sort == "newest":
        return sorted(items, key=_year, reverse=True)
    if sort == "oldest":
        return sorted(items, key=_year)
    if sort == "artist":
        return sorted(items, key=lambda artwork: _collation_key(artwork.artist))
    if sort == "popular":
        return sorted(
            items, key=lambda artwork: (not artwork.is_user_submitted, -_year(artwork))
        )
    return items


def _year(artwork: Artwork) -> int:
    return artwork.year or 0


def _collation_key(value: str) -> tuple[str, str]:
    """Accent- and case-insensitive ordering; on ties lowercase sorts first."""
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(char for char in decomposed if not unicodedata.combining(char))
    return (base.casefold(), value.swapcase())
