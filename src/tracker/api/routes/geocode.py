"""Direct geocoding lookup endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...schemas.artists import CoordinatesModel
from ...services.geocoding import Geocoder, GeocodingError
from ..dependencies import get_geocoder

router = APIRouter(tags=["geocode"])


@router.get("/geocode", response_model=CoordinatesModel, status_code=status.HTTP_200_OK)
def geocode_address(
    address: str = Query(..., description="Free-text location, e.g. 'paris-france'"),
    geocoder: Geocoder = Depends(get_geocoder),
) -> CoordinatesModel:
    if not address.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Parameter 'address' is required.")
    try:
        coords = geocoder.resolve(address)
    except GeocodingError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return CoordinatesModel.model_validate(coords)
