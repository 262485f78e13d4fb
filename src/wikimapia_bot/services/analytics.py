"""Fire-and-forget usage tracking."""

import asyncio
import logging
from dataclasses import dataclass, field

from wikimapia_bot.adapters.analytics_client import AnalyticsClient

_logger = logging.getLogger(__name__)


@dataclass
class AnalyticsService:
    """Schedule tracking calls without waiting for them."""

    client: AnalyticsClient
    _pending: set[asyncio.Task[None]] = field(
        default_factory=set, init=False, repr=False
    )

    def track(self, user_id: int, event: str) -> None:
        """Send an event in the background; the result is never observed."""
        task = asyncio.get_running_loop().create_task(
            self.client.track(user_id, event)
        )
        self._pending.add(task)
        task.add_done_callback(self._finished)

    async def drain(self) -> None:
        """Wait for in-flight events, used on shutdown and in tests."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

    def _finished(self, task: asyncio.Task[None]) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            _logger.warning("Analytics event failed: %s", exc)
