"""Supabase-backed key-value storage."""

from dataclasses import dataclass

from supabase import Client

from art_gallery.services.storage import StorageBackend


@dataclass
class SupabaseStorageBackend(StorageBackend):
    """Supabase implementation storing raw values in a key/value table."""

    client: Client
    table: str = "kv_store"

    def read(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""
        response = (
            self.client.table(self.table)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("value")

    def write(self, key: str, value: str) -> None:
        """Insert or replace the value for a key."""
        self.client.table(self.table).upsert({"key": key, "value": value}).execute()

    def delete(self, key: str) -> None:
        """Delete the row for a key."""
        self.client.table(self.table).delete().eq("key", key).execute()
