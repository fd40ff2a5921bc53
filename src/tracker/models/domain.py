"""Domain models for catalog artists and geocoded tour stops."""

from dataclasses import dataclass, field


@dataclass(slots=True)
class Artist:
    """An artist record joined with its locations, dates and relations."""

    id: int
    name: str
    image: str = ""
    members: list[str] = field(default_factory=list)
    creation_date: int = 0
    first_album: str = ""
    locations: list[str] = field(default_factory=list)
    concert_dates: list[str] = field(default_factory=list)
    dates_locations: dict[str, list[str]] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class Coordinates:
    """Latitude/longitude in degrees. ``Coordinates()`` marks an unresolved address."""

    latitude: float = 0.0
    longitude: float = 0.0


@dataclass(slots=True)
class LocationWithCoords:
    location: str
    coordinates: Coordinates
    dates: list[str]


@dataclass(slots=True)
class LocationDates:
    raw: str
    pretty: str
    dates: list[str]
    count: int
    pretty_dates: list[str] = field(default_factory=list)
