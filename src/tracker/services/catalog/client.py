"""HTTP client for the remote artist catalog API."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, Field, TypeAdapter, ValidationError, field_validator

from ...config import settings
from ...models.domain import Artist
from ..formatting import clean_dates

logger = logging.getLogger(__name__)


class CatalogError(RuntimeError):
    """Raised when any part of a catalog fetch fails."""


class ArtistPayload(BaseModel):
    id: int
    name: str
    image: str = ""
    members: list[str] = Field(default_factory=list)
    creation_date: int = Field(default=0, alias="creationDate")
    first_album: str = Field(default="", alias="firstAlbum")

    @field_validator("image", "first_album", mode="before")
    @classmethod
    def _null_to_empty_str(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("creation_date", mode="before")
    @classmethod
    def _null_to_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("members", mode="before")
    @classmethod
    def _null_to_empty_list(cls, value: Any) -> Any:
        return [] if value is None else value


class LocationsEntry(BaseModel):
    id: int
    locations: list[str] = Field(default_factory=list)

    @field_validator("locations", mode="before")
    @classmethod
    def _null_to_empty_list(cls, value: Any) -> Any:
        return [] if value is None else value


class DatesEntry(BaseModel):
    id: int
    dates: list[str] = Field(default_factory=list)

    @field_validator("dates", mode="before")
    @classmethod
    def _null_to_empty_list(cls, value: Any) -> Any:
        return [] if value is None else value


class RelationsEntry(BaseModel):
    id: int
    dates_locations: dict[str, list[str]] = Field(default_factory=dict, alias="datesLocations")

    @field_validator("dates_locations", mode="before")
    @classmethod
    def _null_to_empty_dict(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {location: [] if dates is None else dates for location, dates in value.items()}
        return value


class LocationsPayload(BaseModel):
    index: list[LocationsEntry]

    @field_validator("index", mode="before")
    @classmethod
    def _null_to_empty_index(cls, value: Any) -> Any:
        return [] if value is None else value


class DatesPayload(BaseModel):
    index: list[DatesEntry]

    @field_validator("index", mode="before")
    @classmethod
    def _null_to_empty_index(cls, value: Any) -> Any:
        return [] if value is None else value


class RelationsPayload(BaseModel):
    index: list[RelationsEntry]

    @field_validator("index", mode="before")
    @classmethod
    def _null_to_empty_index(cls, value: Any) -> Any:
        return [] if value is None else value


_ARTISTS_ADAPTER = TypeAdapter(list[ArtistPayload])


class CatalogClient:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.catalog_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.client_timeout_seconds
        self.transport = transport

    def _get_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout),
            headers={"Accept": "application/json"},
            transport=self.transport,
        )

    def _endpoint(self, path: str) -> str:
        return f"{self.base_url}/{path}"

    def _fetch_json(self, client: httpx.Client, path: str) -> Any:
        url = self._endpoint(path)
        try:
            response = client.get(url)
        except httpx.HTTPError as exc:
            raise CatalogError(f"Request to {url} failed: {exc}") from exc
        if response.status_code != httpx.codes.OK:
            raise CatalogError(f"Request to {url} returned {response.status_code}")
        try:
            return response.json()
        except ValueError as exc:
            raise CatalogError(f"Invalid JSON returned by {url}: {exc}") from exc

    def _fetch_validated(self, client: httpx.Client, path: str, adapter: Any) -> Any:
        data = self._fetch_json(client, path)
        try:
            return adapter(data)
        except ValidationError as exc:
            raise CatalogError(f"Unexpected payload shape from {self._endpoint(path)}: {exc}") from exc

    def fetch_locations(self, client: httpx.Client) -> dict[int, list[str]]:
        payload = self._fetch_validated(client, settings.catalog_locations_path, LocationsPayload.model_validate)
        return {entry.id: entry.locations for entry in payload.index}

    def fetch_dates(self, client: httpx.Client) -> dict[int, list[str]]:
        payload = self._fetch_validated(client, settings.catalog_dates_path, DatesPayload.model_validate)
        return {entry.id: entry.dates for entry in payload.index}

    def fetch_relations(self, client: httpx.Client) -> dict[int, dict[str, list[str]]]:
        payload = self._fetch_validated(client, settings.catalog_relations_path, RelationsPayload.model_validate)
        return {entry.id: entry.dates_locations for entry in payload.index}

    def fetch_catalog(self) -> list[Artist]:
        """Fetch all four catalog resources and join them by artist id.

        Raises:
            CatalogError: if any request fails, returns a non-200 status, or
                yields a payload that cannot be decoded. Nothing partial is
                returned in that case.
        """
        client = self._get_client()
        try:
            artists = self._fetch_validated(client, settings.catalog_artists_path, _ARTISTS_ADAPTER.validate_python)
            locations = self.fetch_locations(client)
            dates = self.fetch_dates(client)
            relations = self.fetch_relations(client)
        finally:
            client.close()

        valid = []
        for payload in artists:
            if payload.id <= 0:
                logger.warning(f"Skipping catalog artist {payload.name!r} with non-positive id {payload.id}")
                continue
            valid.append(payload)

        joined = [
            Artist(
                id=payload.id,
                name=payload.name,
                image=payload.image,
                members=list(payload.members),
                creation_date=payload.creation_date,
                first_album=payload.first_album,
                locations=list(locations.get(payload.id, [])),
                concert_dates=clean_dates(dates.get(payload.id)),
                dates_locations={
                    location: list(values)
                    for location, values in relations.get(payload.id, {}).items()
                },
            )
            for payload in valid
        ]
        logger.info(f"Fetched catalog with {len(joined)} artists from {self.base_url}")
        return joined
