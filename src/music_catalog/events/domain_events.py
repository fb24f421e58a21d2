"""
Domain Events - Specific event implementations.

This module defines the domain events recorded by the catalog repository.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .event_bus import DomainEvent


@dataclass(kw_only=True)
class UserCreated(DomainEvent):
    """Event fired when a user is registered."""
    user_id: str
    name: str
    mobile: str

    def _get_event_data(self) -> Dict[str, Any]:
        return {"user_id": self.user_id, "name": self.name, "mobile": self.mobile}


@dataclass(kw_only=True)
class ArtistCreated(DomainEvent):
    """Event fired when an artist is registered, explicitly or by an album."""
    artist_id: str
    name: str

    def _get_event_data(self) -> Dict[str, Any]:
        return {"artist_id": self.artist_id, "name": self.name}


@dataclass(kw_only=True)
class AlbumCreated(DomainEvent):
    """Event fired when an album is added to an artist."""
    album_id: str
    title: str
    artist_name: str

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "album_id": self.album_id,
            "title": self.title,
            "artist_name": self.artist_name,
        }


@dataclass(kw_only=True)
class SongCreated(DomainEvent):
    """Event fired when a song is added to an album."""
    song_id: str
    title: str
    album_title: str
    length: int

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "song_id": self.song_id,
            "title": self.title,
            "album_title": self.album_title,
            "length": self.length,
        }


@dataclass(kw_only=True)
class PlaylistCreated(DomainEvent):
    """Event fired when a user creates a playlist."""
    playlist_id: str
    title: str
    creator_mobile: str
    song_count: int
    criteria: str  # length, name

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "playlist_id": self.playlist_id,
            "title": self.title,
            "creator_mobile": self.creator_mobile,
            "song_count": self.song_count,
            "criteria": self.criteria,
        }


@dataclass(kw_only=True)
class ListenerAdded(DomainEvent):
    """Event fired when a user becomes a listener of a playlist."""
    playlist_id: str
    playlist_title: str
    mobile: str

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "playlist_id": self.playlist_id,
            "playlist_title": self.playlist_title,
            "mobile": self.mobile,
        }


@dataclass(kw_only=True)
class SongLiked(DomainEvent):
    """Event fired when a user likes a song for the first time."""
    song_id: str
    song_title: str
    mobile: str
    song_likes: int
    artist_name: Optional[str] = None  # None when no owning artist was found

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "song_id": self.song_id,
            "song_title": self.song_title,
            "mobile": self.mobile,
            "song_likes": self.song_likes,
            "artist_name": self.artist_name,
        }
