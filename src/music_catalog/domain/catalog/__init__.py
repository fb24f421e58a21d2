"""
Catalog Context - Managing the music catalog and its listeners.

This bounded context is responsible for:
- Managing artists, albums, songs, playlists and users
- Linking them through ownership, listening and likes
- Computing popularity statistics over the catalog
"""

from .entities import Artist, Album, Song, Playlist, User
from .repositories import CatalogRepository
from .services import CatalogStatistics, CatalogStatisticsService

__all__ = [
    # Entities
    "Artist",
    "Album",
    "Song",
    "Playlist",
    "User",
    # Repositories
    "CatalogRepository",
    # Services
    "CatalogStatistics",
    "CatalogStatisticsService",
]
