"""Geocoding of tour locations through a Nominatim-compatible search API."""

from __future__ import annotations

import logging
import re
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Mapping, Sequence

import httpx

from ..config import settings
from ..models.domain import Coordinates, LocationWithCoords
from .formatting import clean_dates, format_location
from .locking import ReadWriteLock

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


class GeocodingError(RuntimeError):
    """Raised when an address cannot be resolved to coordinates."""


def clean_address(address: str) -> str:
    """Replace underscores with spaces and collapse runs of whitespace."""
    return _WHITESPACE.sub(" ", address.replace("_", " ")).strip()


class Geocoder:
    """Resolves addresses to coordinates with a process-lifetime cache.

    Cache keys are the raw addresses as given by the caller. Entries are
    never evicted. Two concurrent misses on the same address may both call
    the service; the last write wins.
    """

    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
        max_parallel_requests: int | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or settings.geocoder_url
        self.user_agent = user_agent or settings.geocoder_user_agent
        self.timeout = timeout if timeout is not None else settings.client_timeout_seconds
        self.max_parallel_requests = (
            max_parallel_requests if max_parallel_requests is not None else settings.geocode_max_parallel_requests
        )
        if self.max_parallel_requests < 1:
            raise ValueError("max_parallel_requests must be at least 1.")
        self.transport = transport
        self._cache: dict[str, Coordinates] = {}
        self._lock = ReadWriteLock()

    def _get_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout),
            headers={"User-Agent": self.user_agent, "Accept": "application/json"},
            transport=self.transport,
        )

    @property
    def cached_addresses(self) -> int:
        with self._lock.read():
            return len(self._cache)

    def resolve(self, address: str) -> Coordinates:
        """Return coordinates for ``address``, consulting the cache first.

        Raises:
            GeocodingError: on transport failure, non-200 status, an
                unparseable payload, or when the service finds nothing.
        """
        with self._lock.read():
            cached = self._cache.get(address)
        if cached is not None:
            return cached

        coords = self._lookup(address)

        with self._lock.write():
            self._cache[address] = coords
        logger.info(f"Geocoded {address!r} -> ({coords.latitude:.6f}, {coords.longitude:.6f})")
        return coords

    def _lookup(self, address: str) -> Coordinates:
        params = {"q": clean_address(address), "format": "json", "limit": "1"}
        client = self._get_client()
        try:
            response = client.get(self.base_url, params=params)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as exc:
            raise GeocodingError(f"Geocoding request failed for {address!r}: {exc}") from exc
        finally:
            client.close()

        if response.status_code != httpx.codes.OK:
            raise GeocodingError(f"Geocoding service returned {response.status_code} for {address!r}: {response.text}")
        try:
            results = response.json()
        except ValueError as exc:
            raise GeocodingError(f"Invalid JSON from geocoding service for {address!r}: {exc}") from exc
        if not isinstance(results, list):
            raise GeocodingError(f"Unexpected geocoding payload for {address!r}")
        if not results:
            raise GeocodingError(f"Address not found: {address}")

        first = results[0]
        try:
            return Coordinates(latitude=float(first["lat"]), longitude=float(first["lon"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise GeocodingError(f"Unparseable coordinates for {address!r}: {exc}") from exc

    def _resolve_or_sentinel(self, location: str) -> Coordinates:
        try:
            return self.resolve(location)
        except GeocodingError as exc:
            logger.warning(f"Geocoding failed for {location}: {exc}")
            return Coordinates()

    def resolve_all(self, dates_locations: Mapping[str, Sequence[str]] | None) -> list[LocationWithCoords]:
        """Geocode every location key concurrently.

        At most ``max_parallel_requests`` lookups are in flight for this call;
        the limit is not shared with other concurrent calls. Failed lookups
        come back as ``Coordinates()``. Results are in completion order.
        """
        if not dates_locations:
            return []

        results: list[LocationWithCoords] = []
        with ThreadPoolExecutor(max_workers=self.max_parallel_requests) as executor:
            future_to_location = {
                executor.submit(self._resolve_or_sentinel, location): location
                for location in dates_locations
            }
            for future in as_completed(future_to_location):
                location = future_to_location[future]
                results.append(
                    LocationWithCoords(
                        location=format_location(location),
                        coordinates=future.result(),
                        dates=clean_dates(dates_locations[location]),
                    )
                )
        return results
