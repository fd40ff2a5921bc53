import threading
import time

import pytest

from src.tracker.models.domain import Artist
from src.tracker.services.catalog import ArtistCache, CatalogClient, CatalogError


def _artists(version: str, count: int = 50) -> list[Artist]:
    return [Artist(id=i, name=f"{version}-{i}", members=[f"member-{i}"]) for i in range(1, count + 1)]


class StubCatalog:
    def __init__(self, *batches):
        self.batches = list(batches)
        self.calls = 0

    def fetch_catalog(self):
        self.calls += 1
        batch = self.batches.pop(0)
        if isinstance(batch, Exception):
            raise batch
        return batch


def test_find_by_id_on_empty_cache_returns_none():
    cache = ArtistCache(StubCatalog())

    assert cache.find_by_id(1) is None
    assert cache.list() == []
    assert len(cache) == 0
    assert cache.last_refreshed is None


def test_refresh_publishes_snapshot(catalog_transport):
    cache = ArtistCache(CatalogClient(base_url="https://catalog.test/api", transport=catalog_transport))

    count = cache.refresh()

    assert count == 2
    assert cache.find_by_id(1).name == "Queen"
    assert cache.find_by_id(99) is None
    assert cache.last_refreshed is not None


def test_failed_refresh_keeps_previous_snapshot():
    stub = StubCatalog(_artists("v1", 3), CatalogError("upstream down"))
    cache = ArtistCache(stub)
    cache.refresh()
    refreshed_at = cache.last_refreshed

    with pytest.raises(CatalogError):
        cache.refresh()

    assert [artist.name for artist in cache.list()] == ["v1-1", "v1-2", "v1-3"]
    assert cache.last_refreshed == refreshed_at


def test_list_returns_independent_copies():
    cache = ArtistCache(StubCatalog(_artists("v1", 2)))
    cache.refresh()

    first = cache.list()
    first[0].name = "mutated"
    first[0].members.append("intruder")
    first.clear()

    second = cache.list()
    assert second[0].name == "v1-1"
    assert second[0].members == ["member-1"]

    found = cache.find_by_id(2)
    found.members.append("intruder")
    assert cache.find_by_id(2).members == ["member-2"]


def test_readers_see_whole_snapshots_during_refresh():
    class SlowCatalog:
        def __init__(self):
            self.versions = iter(["v1", "v2", "v3", "v4"])

        def fetch_catalog(self):
            time.sleep(0.01)
            return _artists(next(self.versions))

    cache = ArtistCache(SlowCatalog())
    cache.refresh()

    observed: list[set[str]] = []
    stop = threading.Event()

    def reader():
        while not stop.is_set():
            snapshot = cache.list()
            observed.append({artist.name.split("-")[0] for artist in snapshot})

    readers = [threading.Thread(target=reader) for _ in range(4)]
    for thread in readers:
        thread.start()
    for _ in range(3):
        cache.refresh()
    stop.set()
    for thread in readers:
        thread.join()

    assert observed
    assert all(len(versions) == 1 for versions in observed)
    assert cache.list()[0].name == "v4-1"
