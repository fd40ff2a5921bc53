"""Request-scoped access to the services created in ``create_app``."""

from __future__ import annotations

from fastapi import Request

from ..services.catalog import ArtistCache
from ..services.geocoding import Geocoder


def get_artist_cache(request: Request) -> ArtistCache:
    return request.app.state.artist_cache


def get_geocoder(request: Request) -> Geocoder:
    return request.app.state.geocoder
