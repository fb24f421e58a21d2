"""
Domain Layer - Music Catalog

This module contains the domain layer, organised by bounded context.

Bounded Contexts:
- Catalog: Artists, albums, songs, playlists, users and their relationships
"""

from . import catalog
