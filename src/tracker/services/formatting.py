"""Display helpers for catalog dates and locations, plus artist search."""

from __future__ import annotations

import re
from typing import Iterable, Mapping, Sequence

from ..models.domain import Artist, LocationDates

_LEADING_MARKERS = re.compile(r"^[\s*]+")


def clean_dates(values: Iterable[str] | None) -> list[str]:
    """Strip ``*`` markers and whitespace from each date, dropping empty values.

    The filter preserves order and is idempotent.
    """
    if not values:
        return []
    cleaned: list[str] = []
    for value in values:
        value = _LEADING_MARKERS.sub("", value).rstrip()
        if value:
            cleaned.append(value)
    return cleaned


def format_date(value: str) -> str:
    """Render ``YYYY-MM-DD`` style dates as ``YYYY/MM/DD``."""
    parts = value.split("-")
    if len(parts) != 3:
        return value
    return "/".join(parts)


def capitalize(text: str) -> str:
    words = text.split()
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


def format_location(raw: str) -> str:
    """Turn ``new_york-usa`` into ``New York (USA)``."""
    if not raw:
        return raw
    parts = raw.split("-")
    city = capitalize(parts[0].replace("_", " "))
    if len(parts) == 1:
        return city
    country = parts[1].replace("_", " ").upper()
    return f"{city} ({country})"


def build_location_dates(dates_locations: Mapping[str, Sequence[str]] | None) -> list[LocationDates]:
    """Build the per-location date table, sorted by display name."""
    if not dates_locations:
        return []
    rows: list[LocationDates] = []
    for location, dates in dates_locations.items():
        cleaned = clean_dates(dates)
        rows.append(
            LocationDates(
                raw=location,
                pretty=format_location(location),
                dates=cleaned,
                count=len(cleaned),
                pretty_dates=[format_date(value) for value in cleaned],
            )
        )
    rows.sort(key=lambda row: row.pretty)
    return rows


def artist_matches(artist: Artist, needle: str) -> bool:
    """Case-insensitive substring match on name, members, year, album and locations."""
    if needle in artist.name.lower():
        return True
    if any(needle in member.lower() for member in artist.members):
        return True
    if needle in str(artist.creation_date):
        return True
    if needle in artist.first_album.lower():
        return True
    return any(needle in location.lower() for location in artist.locations)


def filter_artists(artists: list[Artist], query: str | None) -> list[Artist]:
    if not query or not query.strip():
        return artists
    needle = query.strip().lower()
    return [artist for artist in artists if artist_matches(artist, needle)]
