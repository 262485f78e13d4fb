"""Keycap emoji tokens used to number places."""

MAX_ORDINAL = 9

_KEYCAP_SUFFIX = "\ufe0f\u20e3"

_TOKENS: dict[int, str] = {
    ordinal: f"{ordinal}{_KEYCAP_SUFFIX}" for ordinal in range(1, MAX_ORDINAL + 1)
}
_ORDINALS: dict[str, int] = {token: ordinal for ordinal, token in _TOKENS.items()}


def encode(ordinal: int) -> str:
    """Return the keycap emoji for a 1-based ordinal."""
    try:
        return _TOKENS[ordinal]
    except KeyError:
        raise ValueError(f"Ordinal out of range 1..{MAX_ORDINAL}: {ordinal}") from None


def decode(token: str) -> int | None:
    """Return the ordinal for a keycap emoji, or None for any other text."""
    return _ORDINALS.get(token)
