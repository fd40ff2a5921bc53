"""Remote catalog access and the in-memory artist snapshot."""

from .cache import ArtistCache
from .client import CatalogClient, CatalogError

__all__ = ["ArtistCache", "CatalogClient", "CatalogError"]
