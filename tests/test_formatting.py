from src.tracker.models.domain import Artist
from src.tracker.services.formatting import (
    build_location_dates,
    capitalize,
    clean_dates,
    filter_artists,
    format_date,
    format_location,
)


def _artist(artist_id: int, name: str, **kwargs) -> Artist:
    return Artist(id=artist_id, name=name, **kwargs)


def test_format_location_with_country():
    assert format_location("new_york-usa") == "New York (USA)"


def test_format_location_without_country_and_empty():
    assert format_location("london") == "London"
    assert format_location("") == ""


def test_format_date_replaces_separators():
    assert format_date("2023-05-10") == "2023/05/10"
    assert format_date("2023/05/10") == "2023/05/10"
    assert format_date("not-a-date-at-all") == "not-a-date-at-all"


def test_capitalize_normalizes_case_and_spacing():
    assert capitalize("  sAN   frANCISCO ") == "San Francisco"


def test_clean_dates_strips_markers_and_drops_empty_values():
    values = ["*23-08-2019", "  22-08-2019 ", "*", "   ", "* 01-01-2020", "**05-05-2021"]

    cleaned = clean_dates(values)

    assert cleaned == ["23-08-2019", "22-08-2019", "01-01-2020", "05-05-2021"]
    assert all(value and not value.startswith("*") for value in cleaned)


def test_clean_dates_is_idempotent():
    values = ["*23-08-2019", " * 22-08-2019", "", "*  *x", "plain"]

    once = clean_dates(values)

    assert clean_dates(once) == once


def test_clean_dates_handles_missing_input():
    assert clean_dates(None) == []
    assert clean_dates([]) == []


def test_build_location_dates_sorted_by_display_name():
    rows = build_location_dates(
        {
            "paris-france": ["*07-09-2019"],
            "berlin-germany": ["01-01-2020", "02-01-2020"],
        }
    )

    assert [row.pretty for row in rows] == ["Berlin (GERMANY)", "Paris (FRANCE)"]
    assert rows[0].count == 2
    assert rows[1].raw == "paris-france"
    assert rows[1].dates == ["07-09-2019"]
    assert rows[0].pretty_dates == ["01/01/2020", "02/01/2020"]
    assert build_location_dates({}) == []


def test_filter_artists_matches_every_searchable_field():
    artists = [
        _artist(1, "Queen", members=["Freddie Mercury"], creation_date=1970, first_album="14-12-1973"),
        _artist(2, "SOJA", members=["Jacob Hemphill"], creation_date=1997, locations=["paris-france"]),
    ]

    assert [a.id for a in filter_artists(artists, "queen")] == [1]
    assert [a.id for a in filter_artists(artists, "HEMPHILL")] == [2]
    assert [a.id for a in filter_artists(artists, "1997")] == [2]
    assert [a.id for a in filter_artists(artists, "12-1973")] == [1]
    assert [a.id for a in filter_artists(artists, "Paris")] == [2]
    assert filter_artists(artists, "nothing matches") == []
    assert filter_artists(artists, "  ") == artists
