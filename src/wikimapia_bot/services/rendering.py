"""Text formatting for place lists and details."""

import html
from collections.abc import Sequence

from wikimapia_bot.domain.places import Place, PlaceDetail
from wikimapia_bot.services.emoji_index import encode

DESCRIPTION_LIMIT = 1024
# Telegram rejects sendMessage texts longer than this.
MESSAGE_LIMIT = 4096
TRUNCATION_MARKER = "..."
_HOUSE = "\U0001f3e0"


def render_list(places: Sequence[Place]) -> str:
    """Render places as emoji-numbered entries separated by blank lines."""
    return "\n\n".join(
        f"{encode(index)} {place.title}" for index, place in enumerate(places, start=1)
    )


def render_detail(detail: PlaceDetail) -> str:
    """Render a place detail for Telegram's HTML parse mode.

    The description is cut to ``DESCRIPTION_LIMIT`` characters before
    escaping. When escaping still pushes the message past
    ``MESSAGE_LIMIT``, the description is cut again on whole escaped
    characters so no entity is split.
    """
    head = f"{_HOUSE} <b>{html.escape(detail.title or '')}</b>\n\n"
    tail = f"\n\n{detail.url_html or ''}"
    description = html.escape(truncate_description(detail.description or ""))
    budget = MESSAGE_LIMIT - len(head) - len(tail)
    if len(description) > budget:
        description = _escape_within(detail.description or "", budget)
    return f"{head}{description}{tail}"


def truncate_description(text: str, limit: int = DESCRIPTION_LIMIT) -> str:
    """Cut text to ``limit`` characters, appending a marker when cut."""
    if len(text) <= limit:
        return text
    return text[:limit] + TRUNCATION_MARKER


def _escape_within(text: str, budget: int) -> str:
    available = budget - len(TRUNCATION_MARKER)
    pieces: list[str] = []
    for char in text:
        piece = html.escape(char)
        available -= len(piece)
        if available < 0:
            break
        pieces.append(piece)
    return "".join(pieces) + TRUNCATION_MARKER
