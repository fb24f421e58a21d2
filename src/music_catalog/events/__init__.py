"""
Event System - Domain Events Architecture

This package implements an event-driven architecture so that code outside
the catalog can react to catalog changes without the catalog knowing it.
"""

from .event_bus import EventBus, DomainEvent
from .domain_events import (
    UserCreated,
    ArtistCreated,
    AlbumCreated,
    SongCreated,
    PlaylistCreated,
    ListenerAdded,
    SongLiked,
)

__all__ = [
    # Core event system
    "EventBus",
    "DomainEvent",
    # Domain events
    "UserCreated",
    "ArtistCreated",
    "AlbumCreated",
    "SongCreated",
    "PlaylistCreated",
    "ListenerAdded",
    "SongLiked",
]
