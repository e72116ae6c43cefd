"""JSON key-value storage used for all persisted gallery state."""

import json
import logging
from dataclasses import dataclass
from typing import Protocol, TypeVar

ARTWORKS_KEY = "artgallery_artworks"
USERS_KEY = "artgallery_users"
CURRENT_USER_KEY = "artgallery_current_user"
DRAFTS_KEY = "artgallery_drafts"

T = TypeVar("T")

_logger = logging.getLogger(__name__)


class StorageBackend(Protocol):
    """Raw string storage addressed by key."""

    def read(self, key: str) -> str | None:
        """Return the raw value for a key, if present."""

    def write(self, key: str, value: str) -> None:
        """Store a raw value, replacing any previous one."""

    def delete(self, key: str) -> None:
        """Delete a key; missing keys are ignored."""


@dataclass
class InMemoryStorageBackend(StorageBackend):
    """Process-local storage backend."""

    _values: dict[str, str]

    def __init__(self) -> None:
        self._values = {}

    def read(self, key: str) -> str | None:
        """Return the stored value."""
        return self._values.get(key)

    def write(self, key: str, value: str) -> None:
        """Store a value."""
        self._values[key] = value

    def delete(self, key: str) -> None:
        """Drop a value if present."""
        self._values.pop(key, None)


@dataclass
class JsonKeyValueStore:
    """Key-value store with JSON payloads and default fallback on bad data.

    There is no locking; concurrent writers race and the last write wins.
    """

    backend: StorageBackend

    def get(self, key: str, default: T) -> T:
        """Return the decoded value for a key, or ``default`` if absent or corrupt."""
        try:
            raw = self.backend.read(key)
        except Exception:
            _logger.warning("Storage read failed for key=%s", key, exc_info=True)
            return default
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except ValueError:
            _logger.warning("Discarding corrupt value for key=%s", key)
            return default

    def set(self, key: str, value: object) -> None:
        """Encode and store a value, overwriting any previous one."""
        self.backend.write(key, json.dumps(value))

    def remove(self, key: str) -> None:
        """Remove a key; no-op when absent."""
        self.backend.delete(key)
