"""Usage analytics client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class AnalyticsClient(Protocol):
    """Interface for recording usage events."""

    async def track(self, user_id: int, event: str) -> None:
        """Record one event for a Telegram user."""


@dataclass
class HttpxAnalyticsClient(AnalyticsClient):
    """Botan-style tracking endpoint client."""

    token: str
    url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, token: str, url: str) -> "HttpxAnalyticsClient":
        """Create an analytics client with a managed httpx session."""
        return cls(token=token, url=url, http_client=httpx.AsyncClient())

    async def track(self, user_id: int, event: str) -> None:
        """Post an event to the tracking endpoint."""
        response = await self.http_client.post(
            self.url,
            params={"token": self.token, "uid": user_id, "name": event},
            json={},
            timeout=5,
        )
        response.raise_for_status()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


class NullAnalyticsClient(AnalyticsClient):
    """Analytics client used when tracking is not configured."""

    async def track(self, user_id: int, event: str) -> None:
        return None

    async def close(self) -> None:
        return None
