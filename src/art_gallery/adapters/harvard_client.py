"""Harvard Art Museums API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

HARVARD_CLASSIFICATIONS = "Paintings|Photographs|Sculptures"


class MuseumApiClient(Protocol):
    """Interface for museum catalog API interactions."""

    async def fetch_objects(self, page: int, size: int) -> dict[str, object]:
        """Fetch a page of object records and return raw API data."""


@dataclass
class HttpxHarvardClient(MuseumApiClient):
    """HTTPX-backed Harvard Art Museums client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(
        cls, api_key: str, base_url: str, timeout_seconds: float = 15
    ) -> "HttpxHarvardClient":
        """Create a museum client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def fetch_objects(self, page: int, size: int) -> dict[str, object]:
        """Fetch object records that have an image."""
        url = f"{self.base_url}/object"
        response = await self.http_client.get(
            url,
            params={
                "apikey": self.api_key,
                "size": size,
                "page": page,
                "hasimage": 1,
                "classification": HARVARD_CLASSIFICATIONS,
            },
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
