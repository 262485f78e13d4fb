"""Nearby place lookups backed by Wikimapia."""

import logging
from dataclasses import dataclass

from wikimapia_bot.adapters.wikimapia_client import WikimapiaClient
from wikimapia_bot.domain.places import NearbyPlaces, Place, PlaceDetail, PlacePhoto

_logger = logging.getLogger(__name__)


class PlaceLookupError(RuntimeError):
    """Raised when Wikimapia answers with an error payload."""


@dataclass
class PlacesService:
    """Translate Wikimapia payloads into domain models."""

    client: WikimapiaClient
    nearby_count: int = 9

    async def lookup_nearby(self, lat: float, lon: float, locale: str) -> NearbyPlaces:
        """Return places near a coordinate, nearest first."""
        payload = await self.client.get_nearest(
            lat, lon, language=locale, count=self.nearby_count
        )
        _raise_for_debug(payload)
        places = tuple(
            Place(id=int(item["id"]), title=str(item.get("title") or ""))
            for item in payload.get("places") or []
            if isinstance(item, dict) and item.get("id") is not None
        )
        _logger.info("Nearby lookup: lat=%s lon=%s results=%s", lat, lon, len(places))
        return NearbyPlaces(places=places, count=len(places))

    async def lookup_detail(self, place_id: int, locale: str) -> PlaceDetail:
        """Return the full record for a place."""
        payload = await self.client.get_by_id(place_id, language=locale)
        _raise_for_debug(payload)
        if payload.get("id") is None:
            raise PlaceLookupError(f"Place {place_id} not found")
        photos = tuple(
            PlacePhoto(big_url=str(photo.get("big_url") or ""))
            for photo in payload.get("photos") or []
            if isinstance(photo, dict)
        )
        return PlaceDetail(
            id=int(payload["id"]),
            title=str(payload.get("title") or ""),
            description=str(payload.get("description") or ""),
            url_html=str(payload.get("urlhtml") or ""),
            photos=photos,
        )


def _raise_for_debug(payload: dict[str, object]) -> None:
    """Raise when the payload carries Wikimapia's error block."""
    debug = payload.get("debug")
    if isinstance(debug, dict):
        raise PlaceLookupError(
            f"Wikimapia error {debug.get('code')}: {debug.get('message')}"
        )
