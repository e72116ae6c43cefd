"""Dependency container wiring for the gallery."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from art_gallery.adapters.file_storage_backend import FileStorageBackend
from art_gallery.adapters.harvard_client import HttpxHarvardClient
from art_gallery.adapters.supabase_storage_backend import SupabaseStorageBackend
from art_gallery.app_logging import configure_logging
from art_gallery.config import Settings
from art_gallery.services.artworks import ArtworkService
from art_gallery.services.auth import AuthService
from art_gallery.services.ids import TimestampIdGenerator
from art_gallery.services.museum import MuseumService
from art_gallery.services.storage import (
    InMemoryStorageBackend,
    JsonKeyValueStore,
    StorageBackend,
)


@dataclass
class AppContainer:
    """Holds the gallery's process-wide services."""

    settings: Settings
    store: JsonKeyValueStore
    museum_service: MuseumService
    artwork_service: ArtworkService
    auth_service: AuthService
    close_resources: Callable[[], Awaitable[None]]


def build_storage_backend(settings: Settings) -> StorageBackend:
    """Create the storage backend selected in settings."""
    if settings.storage_backend == "memory":
        return InMemoryStorageBackend()
    if settings.storage_backend == "file":
        return FileStorageBackend.create(settings.storage_dir)
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "Supabase storage needs supabase_url and supabase_service_key"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseStorageBackend(client, table=settings.supabase_table)
    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level, resolved_settings.log_format)
    store = JsonKeyValueStore(build_storage_backend(resolved_settings))
    harvard_client = None
    if resolved_settings.harvard_api_key:
        harvard_client = HttpxHarvardClient.create(
            api_key=resolved_settings.harvard_api_key,
            base_url=resolved_settings.harvard_base_url,
            timeout_seconds=resolved_settings.museum_timeout_seconds,
        )
    museum_service = MuseumService(
        client=harvard_client,
        retry_attempts=resolved_settings.museum_retry_attempts,
    )
    ids = TimestampIdGenerator()
    artwork_service = ArtworkService(
        store=store,
        museum_service=museum_service,
        museum_page=resolved_settings.museum_page,
        museum_page_size=resolved_settings.museum_page_size,
        ids=ids,
    )
    auth_service = AuthService(store=store, ids=ids)

    async def close_resources() -> None:
        if harvard_client is not None:
            await harvard_client.close()

    return AppContainer(
        settings=resolved_settings,
        store=store,
        museum_service=museum_service,
        artwork_service=artwork_service,
        auth_service=auth_service,
        close_resources=close_resources,
    )
