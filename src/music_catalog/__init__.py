"""Music Catalog

An in-memory store for artists, albums, songs, playlists and the users
who listen to and like them.
"""

__version__ = "0.1.0"

from .domain.catalog import (
    Artist,
    Album,
    Song,
    Playlist,
    User,
    CatalogRepository,
    CatalogStatistics,
    CatalogStatisticsService,
)
from .infrastructure.repositories import InMemoryCatalogRepository
from .exceptions import MusicCatalogError, NotFoundError, ConfigurationError
from .models.config import Config, load_config

__all__ = [
    # Entities
    "Artist",
    "Album",
    "Song",
    "Playlist",
    "User",

    # Store
    "CatalogRepository",
    "InMemoryCatalogRepository",

    # Statistics
    "CatalogStatistics",
    "CatalogStatisticsService",

    # Errors
    "MusicCatalogError",
    "NotFoundError",
    "ConfigurationError",

    # Configuration
    "Config",
    "load_config",
]
