"""User-facing message catalog."""

from enum import Enum

DEFAULT_LOCALE = "en"


class Message(Enum):
    """Message keys; values are the English source texts."""

    NO_PLACES_FOUND = "No places found"
    CHOOSE_LANGUAGE = "Choose language"
    SHARE_LOCATION = "Share location"
    SOMETHING_WENT_WRONG = "Something went wrong"
    CANT_LOAD_PLACE = "Can't load place information"
    SHARE_YOUR_LOCATION = "Please share your location"


_CATALOG: dict[str, dict[Message, str]] = {
    "ru": {
        Message.NO_PLACES_FOUND: "Поблизости ничего не найдено",
        Message.CHOOSE_LANGUAGE: "Выберите язык",
        Message.SHARE_LOCATION: "Отправить местоположение",
        Message.SOMETHING_WENT_WRONG: "Что-то пошло не так",
        Message.CANT_LOAD_PLACE: "Не удалось загрузить информацию о месте",
        Message.SHARE_YOUR_LOCATION: "Пожалуйста, отправьте своё местоположение",
    },
}


def translate(message: Message, locale: str) -> str:
    """Return the text for a message in the given locale, English if unknown."""
    return _CATALOG.get(locale, {}).get(message, message.value)
