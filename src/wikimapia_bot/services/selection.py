"""Map an emoji button press back to a listed place."""

from dataclasses import dataclass
from enum import Enum

from wikimapia_bot.domain.places import Place
from wikimapia_bot.services.emoji_index import decode
from wikimapia_bot.services.sessions import SessionStore


class ResolutionOutcome(Enum):
    """Classification of an inbound selection attempt."""

    RESOLVED = "resolved"
    NOT_A_SELECTION = "not_a_selection"
    NO_ACTIVE_SESSION = "no_active_session"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a message against the chat's place list."""

    outcome: ResolutionOutcome
    place: Place | None = None
    ordinal: int | None = None


@dataclass
class SelectionResolver:
    """Resolve emoji selections using the session store."""

    session_store: SessionStore

    def resolve(self, chat_id: int, text: str) -> Resolution:
        """Return the place a message selects, or why it selects none."""
        ordinal = decode(text)
        if ordinal is None:
            return Resolution(ResolutionOutcome.NOT_A_SELECTION)
        places = self.session_store.get(chat_id)
        if places is None:
            return Resolution(ResolutionOutcome.NO_ACTIVE_SESSION, ordinal=ordinal)
        if ordinal < 1 or ordinal > len(places):
            return Resolution(ResolutionOutcome.OUT_OF_RANGE, ordinal=ordinal)
        return Resolution(
            ResolutionOutcome.RESOLVED, place=places[ordinal - 1], ordinal=ordinal
        )
