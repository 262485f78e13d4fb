"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from wikimapia_bot.adapters.analytics_client import (
    HttpxAnalyticsClient,
    NullAnalyticsClient,
)
from wikimapia_bot.adapters.photo_downloader import HttpxPhotoDownloader
from wikimapia_bot.adapters.supabase_locale_repository import SupabaseLocaleRepository
from wikimapia_bot.adapters.telegram_client import (
    HttpxTelegramClient,
    TelegramClient,
)
from wikimapia_bot.adapters.wikimapia_client import HttpxWikimapiaClient
from wikimapia_bot.config import Settings
from wikimapia_bot.services.analytics import AnalyticsService
from wikimapia_bot.services.bot import PlaceBot
from wikimapia_bot.services.locales import LocaleService
from wikimapia_bot.services.photos import PhotoFetchPipeline
from wikimapia_bot.services.places import PlacesService
from wikimapia_bot.services.selection import SelectionResolver
from wikimapia_bot.services.sessions import InMemorySessionStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    telegram_client: TelegramClient
    bot: PlaceBot
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    telegram_client = HttpxTelegramClient.create(resolved_settings.telegram_bot_token)
    wikimapia_client = HttpxWikimapiaClient.create(
        api_key=resolved_settings.wikimapia_api_key,
        base_url=resolved_settings.wikimapia_base_url,
    )
    photo_downloader = HttpxPhotoDownloader.create()
    if resolved_settings.analytics_token:
        analytics_client: HttpxAnalyticsClient | NullAnalyticsClient = (
            HttpxAnalyticsClient.create(
                token=resolved_settings.analytics_token,
                url=resolved_settings.analytics_url,
            )
        )
    else:
        analytics_client = NullAnalyticsClient()
    analytics = AnalyticsService(analytics_client)

    session_store = InMemorySessionStore()
    bot = PlaceBot(
        telegram_client=telegram_client,
        places_service=PlacesService(
            wikimapia_client, nearby_count=resolved_settings.nearby_count
        ),
        session_store=session_store,
        selection_resolver=SelectionResolver(session_store),
        locale_service=LocaleService(SupabaseLocaleRepository(supabase_client)),
        photo_pipeline=PhotoFetchPipeline(
            photo_downloader, limit=resolved_settings.photo_limit
        ),
        analytics=analytics,
    )

    async def close_resources() -> None:
        await analytics.drain()
        await telegram_client.close()
        await wikimapia_client.close()
        await photo_downloader.close()
        await analytics_client.close()

    return AppContainer(
        settings=resolved_settings,
        telegram_client=telegram_client,
        bot=bot,
        close_resources=close_resources,
    )
