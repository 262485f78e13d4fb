"""Supabase repository for chat locales."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from wikimapia_bot.services.locales import LocaleRepository


@dataclass
class SupabaseLocaleRepository(LocaleRepository):
    """Supabase implementation for chat locales."""

    client: Client

    def get_locale(self, chat_id: int) -> str | None:
        """Return the stored locale for a chat."""
        response = (
            self.client.table("chat_locales")
            .select("locale")
            .eq("chat_id", str(chat_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("locale")

    def set_locale(self, chat_id: int, locale: str) -> None:
        """Insert or replace the chat's locale."""
        self.client.table("chat_locales").upsert(
            {
                "chat_id": str(chat_id),
                "locale": locale,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="chat_id",
        ).execute()
