"""Telegram reply keyboard builders."""

from wikimapia_bot.services.emoji_index import MAX_ORDINAL, encode
from wikimapia_bot.services.locales import LANGUAGE_TOKENS

ROW_WIDTH = 3


def keyboard_rows(count: int, width: int = ROW_WIDTH) -> list[list[int]]:
    """Group ordinals 1..min(count, 9) into rows of ``width``."""
    ordinals = list(range(1, min(count, MAX_ORDINAL) + 1))
    return [ordinals[start : start + width] for start in range(0, len(ordinals), width)]


def location_keyboard(count: int, share_label: str) -> dict:
    """Build the share-location keyboard with ``count`` selectable emoji buttons."""
    keyboard: list[list[dict[str, object]]] = [
        [{"text": share_label, "request_location": True}]
    ]
    for row in keyboard_rows(count):
        keyboard.append([{"text": encode(ordinal)} for ordinal in row])
    return {"keyboard": keyboard, "resize_keyboard": True}


def language_keyboard() -> dict:
    """Build a single-row keyboard with one flag per supported language."""
    return {
        "keyboard": [[{"text": token} for token in LANGUAGE_TOKENS]],
        "resize_keyboard": True,
    }
