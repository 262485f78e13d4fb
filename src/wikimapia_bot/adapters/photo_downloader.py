"""Remote photo download client."""

from dataclasses import dataclass
from pathlib import Path

import httpx

from wikimapia_bot.services.photos import PhotoDownloader


@dataclass
class HttpxPhotoDownloader(PhotoDownloader):
    """Photo downloader using httpx streaming."""

    http_client: httpx.AsyncClient

    @classmethod
    def create(cls) -> "HttpxPhotoDownloader":
        """Create a downloader with a managed httpx session."""
        return cls(http_client=httpx.AsyncClient(follow_redirects=True))

    async def download(self, url: str, destination: Path) -> None:
        """Stream the response body for ``url`` into ``destination``."""
        async with self.http_client.stream("GET", url, timeout=20) as response:
            response.raise_for_status()
            with destination.open("wb") as out:
                async for chunk in response.aiter_bytes():
                    out.write(chunk)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
