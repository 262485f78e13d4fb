"""Conversation flow: location shares, selections and language choice."""

import logging
from dataclasses import dataclass

from wikimapia_bot.adapters.telegram_client import TelegramClient
from wikimapia_bot.domain.places import Place
from wikimapia_bot.i18n import Message, translate
from wikimapia_bot.services.analytics import AnalyticsService
from wikimapia_bot.services.emoji_index import MAX_ORDINAL
from wikimapia_bot.services.keyboards import language_keyboard, location_keyboard
from wikimapia_bot.services.locales import LocaleService, locale_for_token
from wikimapia_bot.services.photos import PhotoFetchPipeline, remove_files
from wikimapia_bot.services.places import PlacesService
from wikimapia_bot.services.rendering import render_detail, render_list
from wikimapia_bot.services.selection import ResolutionOutcome, SelectionResolver
from wikimapia_bot.services.sessions import SessionStore

_logger = logging.getLogger(__name__)
_location_logger = logging.getLogger("wikimapia_bot.locations")


@dataclass
class PlaceBot:
    """Handle one inbound Telegram message at a time."""

    telegram_client: TelegramClient
    places_service: PlacesService
    session_store: SessionStore
    selection_resolver: SelectionResolver
    locale_service: LocaleService
    photo_pipeline: PhotoFetchPipeline
    analytics: AnalyticsService

    async def handle_location(
        self, chat_id: int, user_id: int, lat: float, lon: float
    ) -> None:
        """List places near a shared location and remember them for the chat."""
        _location_logger.info(
            "Location lat=%s lon=%s chat=%s user=%s", lat, lon, chat_id, user_id
        )
        self.analytics.track(user_id, "location")
        locale = self.locale_service.get_locale(chat_id)
        try:
            nearby = await self.places_service.lookup_nearby(lat, lon, locale)
        except Exception:
            _logger.exception("Nearby lookup failed", extra={"chat_id": chat_id})
            await self._send(chat_id, Message.SOMETHING_WENT_WRONG, locale)
            return

        places = nearby.places[:MAX_ORDINAL]
        self.session_store.put(chat_id, places)
        if not places:
            await self.telegram_client.send_message(
                chat_id=chat_id,
                text=translate(Message.NO_PLACES_FOUND, locale),
                reply_markup=self._location_keyboard(0, locale),
            )
            return
        await self.telegram_client.send_message(
            chat_id=chat_id,
            text=render_list(places),
            reply_markup=self._location_keyboard(len(places), locale),
        )

    async def handle_text(self, chat_id: int, user_id: int, text: str) -> None:
        """Handle a selection, a language command, or prompt for a location."""
        resolution = self.selection_resolver.resolve(chat_id, text)
        if resolution.outcome is not ResolutionOutcome.NOT_A_SELECTION:
            # Every decoded tap is tracked, including rejected ones.
            self.analytics.track(user_id, "place")
            if resolution.outcome is ResolutionOutcome.RESOLVED:
                await self._send_place(chat_id, resolution.place)
                return
            _logger.info(
                "Rejected selection %s: %s",
                resolution.ordinal,
                resolution.outcome.value,
                extra={"chat_id": chat_id},
            )
            await self._send(
                chat_id,
                Message.SOMETHING_WENT_WRONG,
                self.locale_service.get_locale(chat_id),
            )
            return

        if text.startswith("/lang"):
            await self.telegram_client.send_message(
                chat_id=chat_id,
                text=translate(
                    Message.CHOOSE_LANGUAGE, self.locale_service.get_locale(chat_id)
                ),
                reply_markup=language_keyboard(),
            )
            return

        selected_locale = locale_for_token(text)
        if selected_locale is not None:
            self.locale_service.set_locale(chat_id, selected_locale)

        await self.prompt_for_location(chat_id)

    async def prompt_for_location(self, chat_id: int) -> None:
        """Ask the chat to share a location, with no selection buttons."""
        locale = self.locale_service.get_locale(chat_id)
        await self.telegram_client.send_message(
            chat_id=chat_id,
            text=translate(Message.SHARE_YOUR_LOCATION, locale),
            reply_markup=self._location_keyboard(0, locale),
        )

    async def _send_place(self, chat_id: int, place: Place) -> None:
        locale = self.locale_service.get_locale(chat_id)
        try:
            detail = await self.places_service.lookup_detail(place.id, locale)
        except Exception:
            _logger.exception(
                "Place lookup failed", extra={"chat_id": chat_id, "place_id": place.id}
            )
            await self._send(chat_id, Message.CANT_LOAD_PLACE, locale)
            return

        await self.telegram_client.send_message(
            chat_id=chat_id, text=render_detail(detail), parse_mode="HTML"
        )
        photo_paths = await self.photo_pipeline.fetch_up_to(detail.photos)
        try:
            for path in photo_paths:
                try:
                    await self.telegram_client.send_photo(chat_id, path)
                except Exception:
                    _logger.warning(
                        "Failed to send photo %s", path.name, exc_info=True
                    )
        finally:
            remove_files(photo_paths)

    async def _send(self, chat_id: int, message: Message, locale: str) -> None:
        await self.telegram_client.send_message(
            chat_id=chat_id, text=translate(message, locale)
        )

    def _location_keyboard(self, count: int, locale: str) -> dict:
        return location_keyboard(count, translate(Message.SHARE_LOCATION, locale))
