"""Tests for the file storage backend."""

from pathlib import Path

from art_gallery.adapters.file_storage_backend import FileStorageBackend
from art_gallery.services.storage import JsonKeyValueStore


def test_file_backend_round_trip(tmp_path: Path) -> None:
    backend = FileStorageBackend.create(tmp_path / "store")

    backend.write("artgallery_users", '[{"id": "1"}]')

    assert backend.read("artgallery_users") == '[{"id": "1"}]'
    assert (tmp_path / "store" / "artgallery_users.json").exists()


def test_file_backend_missing_and_delete(tmp_path: Path) -> None:
    backend = FileStorageBackend.create(tmp_path)

    assert backend.read("missing") is None
    backend.delete("missing")
    backend.write("key", "1")
    backend.delete("key")
    assert backend.read("key") is None


def test_file_backend_sanitizes_keys(tmp_path: Path) -> None:
    backend = FileStorageBackend.create(tmp_path)

    backend.write("../escape", "1")

    assert backend.read("../escape") == "1"
    assert not (tmp_path.parent / "escape.json").exists()


def test_corrupt_file_falls_back_to_default(tmp_path: Path) -> None:
    backend = FileStorageBackend.create(tmp_path)
    (tmp_path / "artgallery_drafts.json").write_text("{oops", encoding="utf-8")
    store = JsonKeyValueStore(backend)

    assert store.get("artgallery_drafts", {}) == {}
