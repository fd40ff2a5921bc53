import httpx
import pytest


ARTISTS = [
    {
        "id": 1,
        "image": "https://example.test/queen.jpeg",
        "name": "Queen",
        "members": ["Freddie Mercury", "Brian May"],
        "creationDate": 1970,
        "firstAlbum": "14-12-1973",
        "locations": "https://example.test/api/locations/1",
        "concertDates": "https://example.test/api/dates/1",
        "relations": "https://example.test/api/relation/1",
    },
    {
        "id": 2,
        "image": "https://example.test/soja.jpeg",
        "name": "SOJA",
        "members": ["Jacob Hemphill"],
        "creationDate": 1997,
        "firstAlbum": "05-06-2002",
    },
]

LOCATIONS = {
    "index": [
        {"id": 1, "locations": ["north_carolina-usa", "paris-france"], "dates": "https://example.test/api/dates/1"},
    ]
}

DATES = {"index": [{"id": 1, "dates": ["*23-08-2019", " 22-08-2019 ", "*"]}]}

RELATIONS = {
    "index": [
        {
            "id": 1,
            "datesLocations": {
                "north_carolina-usa": ["23-08-2019", "22-08-2019"],
                "paris-france": ["*07-09-2019"],
            },
        }
    ]
}


def catalog_handler(overrides: dict | None = None):
    """Build a MockTransport handler serving the four catalog resources by path."""
    payloads = {
        "/api/artists": ARTISTS,
        "/api/locations": LOCATIONS,
        "/api/dates": DATES,
        "/api/relation": RELATIONS,
    }
    overrides = overrides or {}

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path in overrides:
            return overrides[path](request)
        if path not in payloads:
            return httpx.Response(404)
        return httpx.Response(200, json=payloads[path])

    return handler


@pytest.fixture
def catalog_transport() -> httpx.MockTransport:
    return httpx.MockTransport(catalog_handler())


@pytest.fixture
def make_catalog_transport():
    """Factory for catalog transports with per-path response overrides."""

    def factory(overrides: dict | None = None) -> httpx.MockTransport:
        return httpx.MockTransport(catalog_handler(overrides))

    return factory
