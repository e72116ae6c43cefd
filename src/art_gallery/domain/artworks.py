"""Domain models for gallery artworks."""

from dataclasses import dataclass, field
from enum import Enum


class ArtworkCategory(Enum):
    """Fixed set of artwork categories."""

    PAINTING = "painting"
    SCULPTURE = "sculpture"
    PHOTOGRAPHY = "photography"
    DIGITAL = "digital"
    MIXED = "mixed"
    OTHER = "other"


@dataclass(frozen=True)
class ArtworkSubmission:
    """User-provided fields for a new artwork; tags may be comma-separated text."""

    title: str
    artist: str
    description: str
    category: ArtworkCategory
    image: str
    tags: tuple[str, ...] | str = ()
    year: int | None = None


@dataclass(frozen=True)
class Artwork:
    """An artwork shown in the gallery, either museum-sourced or user-submitted.

    ``submitted_by`` and ``submitted_at`` are set exactly when
    ``is_user_submitted`` is true.
    """

    id: str
    title: str
    artist: str
    description: str
    category: ArtworkCategory
    image: str
    tags: tuple[str, ...] = field(default_factory=tuple)
    year: int | None = None
    is_user_submitted: bool = False
    submitted_by: str | None = None
    submitted_at: str | None = None

    def __post_init__(self) -> None:
        provenance = (self.submitted_by is not None, self.submitted_at is not None)
        if self.is_user_submitted and provenance != (True, True):
            raise ValueError(
                "User-submitted artworks need submitted_by and submitted_at"
            )
        if not self.is_user_submitted and any(provenance):
            raise ValueError("Only user-submitted artworks carry submission data")

    def matches(self, query: str) -> bool:
        """Return True when the lowercased query occurs in any searchable text."""
        return (
            query in self.title.lower()
            or query in self.artist.lower()
            or query in self.description.lower()
            or any(query in tag.lower() for tag in self.tags)
        )


def build_submitted_artwork(
    submission: ArtworkSubmission, artwork_id: str, user_id: str, submitted_at: str
) -> Artwork:
    """Create a user-submitted artwork from form data."""
    return Artwork(
        id=artwork_id,
        title=submission.title,
        artist=submission.artist,
        description=submission.description,
        category=submission.category,
        image=submission.image,
        tags=parse_tags(submission.tags),
        year=submission.year,
        is_user_submitted=True,
        submitted_by=user_id,
        submitted_at=submitted_at,
    )


def parse_tags(raw: str | list[str] | tuple[str, ...] | None) -> tuple[str, ...]:
    """Split comma-separated tag text into trimmed, non-empty tags."""
    if raw is None:
        return ()
    chunks = raw.split(",") if isinstance(raw, str) else raw
    return tuple(tag.strip() for tag in chunks if tag and tag.strip())


def artwork_to_dict(artwork: Artwork) -> dict[str, object]:
    """Serialize an artwork to its persisted JSON shape."""
    payload: dict[str, object] = {
        "id": artwork.id,
        "title": artwork.title,
        "artist": artwork.artist,
        "description": artwork.description,
        "category": artwork.category.value,
        "image": artwork.image,
        "tags": list(artwork.tags),
        "isUserSubmitted": artwork.is_user_submitted,
    }
    if artwork.year is not None:
        payload["year"] = artwork.year
    if artwork.submitted_by is not None:
        payload["submittedBy"] = artwork.submitted_by
    if artwork.submitted_at is not None:
        payload["submittedAt"] = artwork.submitted_at
    return payload


def artwork_from_dict(row: dict[str, object]) -> Artwork:
    """Parse a persisted artwork payload.

    Raises ``KeyError``, ``TypeError`` or ``ValueError`` for malformed rows.
    """
    year = row.get("year")
    return Artwork(
        id=str(row["id"]),
        title=str(row["title"]),
        artist=str(row["artist"]),
        description=str(row.get("description", "")),
        category=ArtworkCategory(row["category"]),
        image=str(row["image"]),
        tags=tuple(str(tag) for tag in row.get("tags") or []),
        year=int(year) if year is not None else None,
        is_user_submitted=bool(row.get("isUserSubmitted", False)),
        submitted_by=row.get("submittedBy"),
        submitted_at=row.get("submittedAt"),
    )
