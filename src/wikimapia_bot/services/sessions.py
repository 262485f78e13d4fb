"""Most recent place list per chat."""

import threading
from collections.abc import Sequence
from typing import Protocol

from wikimapia_bot.domain.places import Place


class SessionStore(Protocol):
    """Storage for the last list of places shown in each chat."""

    def put(self, chat_id: int, places: Sequence[Place]) -> None:
        """Replace the chat's list of places."""

    def get(self, chat_id: int) -> tuple[Place, ...] | None:
        """Return the chat's list of places, or None if never stored."""


class InMemorySessionStore(SessionStore):
    """Process-local session store; entries live until replaced."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[int, tuple[Place, ...]] = {}

    def put(self, chat_id: int, places: Sequence[Place]) -> None:
        entry = tuple(places)
        with self._lock:
            self._entries[chat_id] = entry

    def get(self, chat_id: int) -> tuple[Place, ...] | None:
        with self._lock:
            return self._entries.get(chat_id)
