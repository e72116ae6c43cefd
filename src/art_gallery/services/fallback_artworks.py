"""Built-in artworks shown when the museum API is unavailable."""

from art_gallery.domain.artworks import Artwork, ArtworkCategory

_UNSPLASH = "https://images.unsplash.com"


def _unsplash(photo_id: str, height: int) -> str:
    return (
        f"{_UNSPLASH}/photo-{photo_id}"
        f"?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h={height}"
    )


FALLBACK_ARTWORKS: tuple[Artwork, ...] = (
    Artwork(
        id="fallback_1",
        title="Sunset Dreams",
        artist="Elena Rodriguez",
        description=(
            "A vibrant abstract interpretation of a Mediterranean sunset, using bold "
            "oranges and deep purples to capture the emotion of twilight."
        ),
        category=ArtworkCategory.PAINTING,
        year=2023,
        image=_unsplash("1541961017774-22349e4a1262", height=1000),
        tags=("abstract", "sunset", "vibrant", "emotional"),
    ),
    Artwork(
        id="fallback_2",
        title="Urban Symphony",
        artist="Marcus Chen",
        description=(
            "A black and white photographic exploration of urban architecture, "
            "highlighting the rhythm and patterns found in city landscapes."
        ),
        category=ArtworkCategory.PHOTOGRAPHY,
        year=2024,
        image=_unsplash("1493514789931-586cb221d7a7", height=1200),
        tags=("architecture", "urban", "black-white", "geometric"),
    ),
    Artwork(
        id="fallback_3",
        title="Digital Metamorphosis",
        artist="Sarah Kim",
        description=(
            "A digital artwork exploring themes of transformation and growth "
            "through organic forms and flowing colors."
        ),
        category=ArtworkCategory.DIGITAL,
        year=2023,
        image=_unsplash("1558618047-3c8c76ca7d13", height=1000),
        tags=("digital", "transformation", "organic", "colorful"),
    ),
    Artwork(
        id="fallback_4",
        title="Timeless Form",
        artist="Antonio Silva",
        description=(
            "A contemporary sculpture that plays with negative space and natural "
            "materials to create a sense of movement and flow."
        ),
        category=ArtworkCategory.SCULPTURE,
        year=2022,
        image=_unsplash("1554188248-986adbb73be4", height=1200),
        tags=("sculpture", "contemporary", "minimal", "form"),
    ),
    Artwork(
        id="fallback_5",
        title="Ocean Dreams",
        artist="Maya Patel",
        description=(
            "An oil painting capturing the serene beauty of ocean waves with "
            "delicate brushwork and subtle color transitions."
        ),
        category=ArtworkCategory.PAINTING,
        year=2024,
        image=_unsplash("1544551763-46a013bb70d5", height=600),
        tags=("ocean", "seascape", "oil-painting", "serene"),
    ),
    Artwork(
        id="fallback_6",
        title="Neon Nights",
        artist="David Wilson",
        description=(
            "A digital photograph capturing the electric energy of city nightlife "
            "through neon reflections and urban landscapes."
        ),
        category=ArtworkCategory.PHOTOGRAPHY,
        year=2023,
        image=_unsplash("1518709268805-4e9042af2176", height=1000),
        tags=("neon", "night", "urban", "energy"),
    ),
)
