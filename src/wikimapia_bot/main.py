"""Long-polling entrypoint."""

import asyncio
import logging

from pydantic import ValidationError

from wikimapia_bot.api.dispatch import dispatch_update
from wikimapia_bot.api.telegram_models import TelegramUpdate
from wikimapia_bot.app_logging import configure_logging
from wikimapia_bot.containers import AppContainer, build_container
from wikimapia_bot.telegram_commands import CHAT_MENU_BUTTON, telegram_commands

_logger = logging.getLogger(__name__)

POLL_TIMEOUT_SECONDS = 60
RETRY_DELAY_SECONDS = 3.0


async def poll_once(container: AppContainer, offset: int | None) -> int | None:
    """Fetch one batch of updates, handle them in order, return the next offset."""
    updates = await container.telegram_client.get_updates(
        offset=offset, timeout=POLL_TIMEOUT_SECONDS
    )
    for raw in updates:
        update_id = raw.get("update_id")
        if isinstance(update_id, int):
            offset = update_id + 1
        try:
            update = TelegramUpdate.model_validate(raw)
        except ValidationError:
            _logger.warning("Skipping malformed update %s", update_id, exc_info=True)
            continue
        await dispatch_update(container.bot, update)
    return offset


async def run_polling(container: AppContainer) -> None:
    """Process updates one at a time until cancelled."""
    try:
        await container.telegram_client.set_my_commands(telegram_commands())
        await container.telegram_client.set_chat_menu_button(CHAT_MENU_BUTTON)
    except Exception:
        _logger.exception("Failed to sync Telegram bot commands")

    offset: int | None = None
    try:
        while True:
            try:
                offset = await poll_once(container, offset)
            except Exception:
                _logger.exception("Polling Telegram failed")
                await asyncio.sleep(RETRY_DELAY_SECONDS)
    finally:
        await container.close_resources()


def main() -> None:
    """Run the bot with long polling."""
    container = build_container()
    configure_logging(container.settings.log_level)
    _logger.info("Starting Wikimapia bot")
    try:
        asyncio.run(run_polling(container))
    except KeyboardInterrupt:
        _logger.info("Stopped")


if __name__ == "__main__":
    main()
