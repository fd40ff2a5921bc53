"""In-memory artist snapshot refreshed from the remote catalog."""

from __future__ import annotations

import copy
import logging
from datetime import datetime, timezone
from typing import Protocol

from ...models.domain import Artist
from ..locking import ReadWriteLock
from .client import CatalogError

logger = logging.getLogger(__name__)


class CatalogSource(Protocol):
    def fetch_catalog(self) -> list[Artist]: ...


class ArtistCache:
    """Owns the current artist snapshot.

    The snapshot is replaced wholesale by :meth:`refresh` and never mutated
    after publication. Readers get deep copies, so a reader iterating its
    list is unaffected by later refreshes or by other readers.
    """

    def __init__(self, client: CatalogSource) -> None:
        self.client = client
        self._lock = ReadWriteLock()
        self._artists: tuple[Artist, ...] = ()
        self._by_id: dict[int, Artist] = {}
        self.last_refreshed: datetime | None = None

    def refresh(self) -> int:
        """Fetch the catalog and swap it in, returning the new artist count.

        The network fetch runs without holding the lock. On failure the
        previous snapshot stays in place and the error propagates.
        """
        try:
            artists = self.client.fetch_catalog()
        except CatalogError as exc:
            logger.error(f"Catalog refresh failed, keeping {len(self)} cached artists: {exc}")
            raise

        snapshot = tuple(artists)
        index = {artist.id: artist for artist in snapshot}
        with self._lock.write():
            self._artists = snapshot
            self._by_id = index
            self.last_refreshed = datetime.now(timezone.utc)
        logger.info(f"Catalog refreshed: {len(snapshot)} artists")
        return len(snapshot)

    def list(self) -> list[Artist]:
        with self._lock.read():
            snapshot = self._artists
        return copy.deepcopy(list(snapshot))

    def find_by_id(self, artist_id: int) -> Artist | None:
        with self._lock.read():
            artist = self._by_id.get(artist_id)
        return copy.deepcopy(artist) if artist is not None else None

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._artists)
