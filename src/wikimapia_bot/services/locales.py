"""Per-chat language preference."""

import logging
from dataclasses import dataclass
from typing import Protocol

from wikimapia_bot.i18n import DEFAULT_LOCALE

_logger = logging.getLogger(__name__)

# Flag emoji shown on the language keyboard, in display order.
LANGUAGE_TOKENS: dict[str, str] = {
    "\U0001f1f7\U0001f1fa": "ru",
    "\U0001f1fa\U0001f1f8": "en",
}


class LocaleRepository(Protocol):
    """Persistence interface for chat locales."""

    def get_locale(self, chat_id: int) -> str | None:
        """Return the stored locale for a chat, if any."""

    def set_locale(self, chat_id: int, locale: str) -> None:
        """Store the locale for a chat, replacing any previous value."""


@dataclass
class LocaleService:
    """Service for chat language preferences."""

    repository: LocaleRepository
    default_locale: str = DEFAULT_LOCALE

    def get_locale(self, chat_id: int) -> str:
        """Return the chat locale, or the default when unset or unreadable."""
        try:
            locale = self.repository.get_locale(chat_id)
        except Exception:
            _logger.warning("Failed to read locale for chat %s", chat_id, exc_info=True)
            return self.default_locale
        return locale or self.default_locale

    def set_locale(self, chat_id: int, locale: str) -> None:
        """Persist the chat locale."""
        self.repository.set_locale(chat_id, locale)


def locale_for_token(text: str) -> str | None:
    """Return the locale selected by a language keyboard token."""
    return LANGUAGE_TOKENS.get(text)
