"""Artist catalog endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...schemas.artists import (
    ArtistDetailResponse,
    ArtistListResponse,
    ArtistModel,
    LocationCoordinatesModel,
    LocationDatesModel,
    RefreshResponse,
)
from ...services.catalog import ArtistCache, CatalogError
from ...services.formatting import build_location_dates, filter_artists
from ...services.geocoding import Geocoder
from ..dependencies import get_artist_cache, get_geocoder

logger = logging.getLogger(__name__)

router = APIRouter(tags=["artists"])


@router.get("/artists", response_model=ArtistListResponse, status_code=status.HTTP_200_OK)
def list_artists(
    q: str = Query(default="", description="Case-insensitive search over name, members, year, album and locations"),
    cache: ArtistCache = Depends(get_artist_cache),
) -> ArtistListResponse:
    query = q.strip()
    artists = cache.list()
    filtered = filter_artists(artists, query)
    return ArtistListResponse(
        query=query,
        count=len(filtered),
        total=len(artists),
        artists=[ArtistModel.model_validate(artist) for artist in filtered],
    )


@router.get("/artists/{artist_id}", response_model=ArtistDetailResponse, status_code=status.HTTP_200_OK)
def get_artist(
    artist_id: int,
    cache: ArtistCache = Depends(get_artist_cache),
    geocoder: Geocoder = Depends(get_geocoder),
) -> ArtistDetailResponse:
    if artist_id <= 0:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid artist identifier.")
    artist = cache.find_by_id(artist_id)
    if artist is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Artist {artist_id} not found.")

    location_dates = build_location_dates(artist.dates_locations)
    # batch results arrive in completion order
    locations_coords = sorted(geocoder.resolve_all(artist.dates_locations), key=lambda item: item.location)

    return ArtistDetailResponse(
        artist=ArtistModel.model_validate(artist),
        location_dates=[LocationDatesModel.model_validate(row) for row in location_dates],
        locations_coords=[LocationCoordinatesModel.model_validate(item) for item in locations_coords],
    )


@router.post("/refresh", response_model=RefreshResponse, status_code=status.HTTP_200_OK)
def refresh_catalog(cache: ArtistCache = Depends(get_artist_cache)) -> RefreshResponse:
    try:
        count = cache.refresh()
    except CatalogError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Unable to refresh catalog data.",
        ) from exc
    return RefreshResponse(status="refreshed", artists=count)
