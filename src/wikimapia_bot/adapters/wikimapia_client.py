"""Wikimapia API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class WikimapiaClient(Protocol):
    """Interface for Wikimapia API interactions."""

    async def get_nearest(
        self, lat: float, lon: float, language: str, count: int
    ) -> dict[str, object]:
        """Return raw place.getnearest data."""

    async def get_by_id(self, place_id: int, language: str) -> dict[str, object]:
        """Return raw place.getbyid data."""


@dataclass
class HttpxWikimapiaClient(WikimapiaClient):
    """HTTPX-backed Wikimapia client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxWikimapiaClient":
        """Create a Wikimapia client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    async def get_nearest(
        self, lat: float, lon: float, language: str, count: int
    ) -> dict[str, object]:
        """Search places around a coordinate."""
        return await self._call(
            "place.getnearest",
            lat=lat,
            lon=lon,
            count=count,
            language=language,
        )

    async def get_by_id(self, place_id: int, language: str) -> dict[str, object]:
        """Fetch one place with its photos."""
        return await self._call(
            "place.getbyid",
            id=place_id,
            language=language,
            data_blocks="main,photos",
        )

    async def _call(self, function: str, **params: object) -> dict[str, object]:
        response = await self.http_client.get(
            self.base_url,
            params={
                "function": function,
                "key": self.api_key,
                "format": "json",
                **params,
            },
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
