"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...services.catalog import ArtistCache
from ...services.geocoding import Geocoder
from ..dependencies import get_artist_cache, get_geocoder

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/catalog", status_code=status.HTTP_200_OK)
def health_catalog(
    cache: ArtistCache = Depends(get_artist_cache),
    geocoder: Geocoder = Depends(get_geocoder),
) -> dict:
    """Report the size and age of the cached catalog."""
    last_refreshed = cache.last_refreshed
    return {
        "service": "catalog",
        "loaded": last_refreshed is not None,
        "artists": len(cache),
        "last_refreshed": last_refreshed.isoformat() if last_refreshed else None,
        "geocoded_locations": geocoder.cached_addresses,
    }
