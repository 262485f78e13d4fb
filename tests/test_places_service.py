"""Tests for the places service."""

import asyncio

import pytest

from wikimapia_bot.domain.places import Place, PlacePhoto
from wikimapia_bot.services.places import PlaceLookupError, PlacesService
from tests.conftest import FakeWikimapiaClient


def test_lookup_nearby_maps_places() -> None:
    client = FakeWikimapiaClient()
    service = PlacesService(client, nearby_count=5)

    nearby = asyncio.run(service.lookup_nearby(55.75, 37.61, "ru"))

    assert nearby.places == (
        Place(id=101, title="Old Mill"),
        Place(id=102, title="Town Hall"),
    )
    assert nearby.count == 2
    assert client.nearest_calls == [(55.75, 37.61, "ru", 5)]


def test_lookup_nearby_empty_result() -> None:
    client = FakeWikimapiaClient(nearest_payload={"count": 0, "found": 0})
    service = PlacesService(client)

    nearby = asyncio.run(service.lookup_nearby(0.0, 0.0, "en"))

    assert nearby.places == ()
    assert nearby.count == 0


def test_lookup_nearby_raises_on_api_error() -> None:
    client = FakeWikimapiaClient(
        nearest_payload={"debug": {"code": 1004, "message": "Invalid key"}}
    )
    service = PlacesService(client)

    with pytest.raises(PlaceLookupError, match="1004"):
        asyncio.run(service.lookup_nearby(0.0, 0.0, "en"))


def test_lookup_detail_maps_fields_and_photos() -> None:
    client = FakeWikimapiaClient(
        details={
            7: {
                "id": 7,
                "title": "Old Mill",
                "description": "Built in 1820.",
                "urlhtml": '<a href="http://wikimapia.org/7/">Old Mill</a>',
                "photos": [
                    {"big_url": "http://photos.wikimapia.org/7_big.jpg"},
                    {"thumbnail_url": "http://photos.wikimapia.org/7_t.jpg"},
                ],
            }
        }
    )
    service = PlacesService(client)

    detail = asyncio.run(service.lookup_detail(7, "en"))

    assert detail.title == "Old Mill"
    assert detail.description == "Built in 1820."
    assert detail.url_html.startswith("<a ")
    assert detail.photos == (
        PlacePhoto(big_url="http://photos.wikimapia.org/7_big.jpg"),
        PlacePhoto(big_url=""),
    )
    assert client.detail_calls == [(7, "en")]


def test_lookup_detail_tolerates_missing_fields() -> None:
    client = FakeWikimapiaClient(details={8: {"id": 8, "description": None}})
    service = PlacesService(client)

    detail = asyncio.run(service.lookup_detail(8, "en"))

    assert detail.title == ""
    assert detail.description == ""
    assert detail.url_html == ""
    assert detail.photos == ()


def test_lookup_detail_unknown_place() -> None:
    client = FakeWikimapiaClient(details={9: {}})
    service = PlacesService(client)

    with pytest.raises(PlaceLookupError):
        asyncio.run(service.lookup_detail(9, "en"))
