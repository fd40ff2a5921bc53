"""Artist-facing API schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict


class CoordinatesModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    latitude: float
    longitude: float


class ArtistModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    image: str = ""
    members: List[str]
    creation_date: int
    first_album: str
    locations: List[str]
    concert_dates: List[str]
    dates_locations: dict[str, List[str]]


class ArtistListResponse(BaseModel):
    query: str
    count: int
    total: int
    artists: List[ArtistModel]


class LocationDatesModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    raw: str
    pretty: str
    dates: List[str]
    count: int
    pretty_dates: List[str]


class LocationCoordinatesModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    location: str
    coordinates: CoordinatesModel
    dates: List[str]


class ArtistDetailResponse(BaseModel):
    artist: ArtistModel
    location_dates: List[LocationDatesModel]
    locations_coords: List[LocationCoordinatesModel]


class RefreshResponse(BaseModel):
    status: str
    artists: int
