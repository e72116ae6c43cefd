"""File-backed storage: one JSON document per key in a directory."""

import os
import re
from dataclasses import dataclass
from pathlib import Path

from art_gallery.services.storage import StorageBackend

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


@dataclass
class FileStorageBackend(StorageBackend):
    """Store each key as ``<directory>/<key>.json``."""

    directory: Path

    @classmethod
    def create(cls, directory: str | Path) -> "FileStorageBackend":
        """Create a backend, making the directory if needed."""
        path = Path(directory)
        path.mkdir(parents=True, exist_ok=True)
        return cls(directory=path)

    def read(self, key: str) -> str | None:
        """Return file contents for a key, if the file exists."""
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, key: str, value: str) -> None:
        """Write a key atomically via a temporary file."""
        path = self._path(key)
        tmp_path = path.with_suffix(".tmp")
        tmp_path.write_text(value, encoding="utf-8")
        os.replace(tmp_path, path)

    def delete(self, key: str) -> None:
        """Remove the file for a key."""
        self._path(key).unlink(missing_ok=True)

    def _path(self, key: str) -> Path:
        return self.directory / f"{_UNSAFE_KEY_CHARS.sub('_', key)}.json"
