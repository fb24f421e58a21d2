"""Catalog Context Repository Interfaces.

This module defines the repository interface for the Catalog bounded context.
The repository owns every entity collection and relationship table, so it
is the single aggregate all catalog operations go through.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .entities import Album, Artist, Playlist, Song, User


class CatalogRepository(ABC):
    """Repository for the music catalog and its relationships."""

    @abstractmethod
    def create_user(self, name: str, mobile: str) -> User:
        """Register a new user."""
        pass

    @abstractmethod
    def create_artist(self, name: str) -> Artist:
        """Register a new artist."""
        pass

    @abstractmethod
    def create_album(self, title: str, artist_name: str) -> Album:
        """Register an album under an artist, creating the artist if needed."""
        pass

    @abstractmethod
    def create_song(self, title: str, album_name: str, length: int) -> Song:
        """Register a song on an existing album."""
        pass

    @abstractmethod
    def create_playlist_on_length(self, mobile: str, title: str, length: int) -> Playlist:
        """Create a playlist of every song with the given length."""
        pass

    @abstractmethod
    def create_playlist_on_name(self, mobile: str, title: str, song_titles: List[str]) -> Playlist:
        """Create a playlist of every song whose title is listed."""
        pass

    @abstractmethod
    def find_playlist(self, mobile: str, playlist_title: str) -> Playlist:
        """Find a playlist and register the user as a listener."""
        pass

    @abstractmethod
    def like_song(self, mobile: str, song_title: str) -> Song:
        """Record a user's like on a song and credit its artist."""
        pass

    @abstractmethod
    def most_popular_artist(self) -> Optional[str]:
        """Get the name of the most liked artist."""
        pass

    @abstractmethod
    def most_popular_song(self) -> Optional[str]:
        """Get the title of the most liked song."""
        pass

    @abstractmethod
    def pull_events(self) -> List:
        """Return the domain events recorded since the last pull and forget them."""
        pass

    @property
    @abstractmethod
    def users(self) -> List[User]:
        """All users in creation order."""
        pass

    @property
    @abstractmethod
    def artists(self) -> List[Artist]:
        """All artists in creation order."""
        pass

    @property
    @abstractmethod
    def albums(self) -> List[Album]:
        """All albums in creation order."""
        pass

    @property
    @abstractmethod
    def songs(self) -> List[Song]:
        """All songs in creation order."""
        pass

    @property
    @abstractmethod
    def playlists(self) -> List[Playlist]:
        """All playlists in creation order."""
        pass
