"""Telegram API client adapter."""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import httpx


class TelegramClient(Protocol):
    """Interface for Telegram API interactions."""

    async def send_message(
        self,
        chat_id: int,
        text: str,
        reply_markup: dict | None = None,
        parse_mode: str | None = None,
    ) -> None:
        """Send a text message to a Telegram chat."""

    async def send_photo(self, chat_id: int, photo_path: Path) -> None:
        """Upload a local image file to a Telegram chat."""

    async def get_updates(
        self, offset: int | None = None, timeout: int = 60
    ) -> list[dict[str, object]]:
        """Long-poll for pending updates."""

    async def set_my_commands(self, commands: list[dict[str, str]]) -> None:
        """Set the bot command list."""

    async def set_chat_menu_button(
        self, menu_button: dict[str, object] | None = None
    ) -> None:
        """Set the chat menu button."""


class TelegramApiError(RuntimeError):
    """Raised when Telegram answers with ``ok: false``."""


@dataclass
class HttpxTelegramClient:
    """Telegram client implemented with httpx."""

    bot_token: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, bot_token: str) -> "HttpxTelegramClient":
        """Create a Telegram client with a managed httpx session."""
        return cls(bot_token=bot_token, http_client=httpx.AsyncClient())

    def _url(self, method: str) -> str:
        return f"https://api.telegram.org/bot{self.bot_token}/{method}"

    async def send_message(
        self,
        chat_id: int,
        text: str,
        reply_markup: dict | None = None,
        parse_mode: str | None = None,
    ) -> None:
        """Send a message using Telegram's sendMessage API."""
        payload: dict[str, object] = {"chat_id": chat_id, "text": text}
        if reply_markup is not None:
            payload["reply_markup"] = reply_markup
        if parse_mode is not None:
            payload["parse_mode"] = parse_mode
        response = await self.http_client.post(
            self._url("sendMessage"), json=payload, timeout=10
        )
        response.raise_for_status()

    async def send_photo(self, chat_id: int, photo_path: Path) -> None:
        """Upload a photo using Telegram's sendPhoto API."""
        with photo_path.open("rb") as photo:
            response = await self.http_client.post(
                self._url("sendPhoto"),
                data={"chat_id": str(chat_id)},
                files={"photo": (photo_path.name, photo)},
                timeout=30,
            )
        response.raise_for_status()

    async def get_updates(
        self, offset: int | None = None, timeout: int = 60
    ) -> list[dict[str, object]]:
        """Long-poll for new updates using Telegram's getUpdates API."""
        params: dict[str, object] = {"timeout": timeout}
        if offset is not None:
            params["offset"] = offset
        response = await self.http_client.get(
            self._url("getUpdates"), params=params, timeout=timeout + 10
        )
        response.raise_for_status()
        payload = response.json()
        if not payload.get("ok"):
            raise TelegramApiError(
                f"Telegram getUpdates failed: {payload.get('description')}"
            )
        return payload.get("result") or []

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()

    async def set_my_commands(self, commands: list[dict[str, str]]) -> None:
        """Set the bot command list."""
        payload: dict[str, object] = {"commands": commands}
        response = await self.http_client.post(
            self._url("setMyCommands"), json=payload, timeout=10
        )
        response.raise_for_status()

    async def set_chat_menu_button(
        self, menu_button: dict[str, object] | None = None
    ) -> None:
        """Set the chat menu button."""
        payload: dict[str, object] = {
            "menu_button": menu_button or {"type": "commands"}
        }
        response = await self.http_client.post(
            self._url("setChatMenuButton"), json=payload, timeout=10
        )
        response.raise_for_status()
