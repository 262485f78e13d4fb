"""Domain models for nearby places."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Place:
    """A nearby point of interest as listed to the user."""

    id: int
    title: str


@dataclass(frozen=True)
class NearbyPlaces:
    """Result of a nearby search."""

    places: tuple[Place, ...]
    count: int


@dataclass(frozen=True)
class PlacePhoto:
    """A photo attached to a place."""

    big_url: str


@dataclass(frozen=True)
class PlaceDetail:
    """Expanded place record fetched on selection."""

    id: int
    title: str
    description: str = ""
    url_html: str = ""
    photos: tuple[PlacePhoto, ...] = field(default_factory=tuple)
