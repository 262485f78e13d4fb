"""Route Telegram updates to the bot with a per-update error boundary."""

import logging

from wikimapia_bot.api.telegram_models import TelegramUpdate
from wikimapia_bot.services.bot import PlaceBot

_logger = logging.getLogger(__name__)


async def dispatch_update(bot: PlaceBot, update: TelegramUpdate) -> bool:
    """Handle one update; return False when handling failed.

    Failures are logged and never raised, so one bad update cannot stop
    the webhook or the polling loop.
    """
    message = update.message
    if message is None:
        return True
    chat_id = message.chat.id
    user_id = message.from_user.id if message.from_user else chat_id
    try:
        if message.location is not None:
            await bot.handle_location(
                chat_id=chat_id,
                user_id=user_id,
                lat=message.location.latitude,
                lon=message.location.longitude,
            )
        elif message.text is not None:
            _logger.info("[%s] %s", user_id, message.text)
            await bot.handle_text(chat_id=chat_id, user_id=user_id, text=message.text)
        else:
            await bot.prompt_for_location(chat_id)
    except Exception:
        _logger.exception(
            "Failed to handle update",
            extra={"update_id": update.update_id, "chat_id": chat_id},
        )
        return False
    return True
