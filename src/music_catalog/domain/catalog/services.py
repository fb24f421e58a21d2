"""Catalog Context Domain Services.

This module defines domain services for the Catalog bounded context.
Domain services contain logic spanning several entities that doesn't
naturally fit on any one of them.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .repositories import CatalogRepository


@dataclass
class CatalogStatistics:
    """Snapshot of catalog size and popularity."""

    total_users: int = 0
    total_artists: int = 0
    total_albums: int = 0
    total_songs: int = 0
    total_playlists: int = 0
    total_song_likes: int = 0
    most_popular_artist: Optional[str] = None
    most_popular_song: Optional[str] = None
    top_artists: List[Tuple[str, int]] = field(default_factory=list)
    top_songs: List[Tuple[str, int]] = field(default_factory=list)


class CatalogStatisticsService:
    """Service computing popularity statistics over a catalog."""

    def __init__(self, repository: CatalogRepository):
        self.repository = repository

    def get_statistics(self, top_n: int = 5) -> CatalogStatistics:
        """Collect counts and the ``top_n`` most liked artists and songs."""
        artists = self.repository.artists
        songs = self.repository.songs

        return CatalogStatistics(
            total_users=len(self.repository.users),
            total_artists=len(artists),
            total_albums=len(self.repository.albums),
            total_songs=len(songs),
            total_playlists=len(self.repository.playlists),
            total_song_likes=sum(song.likes for song in songs),
            most_popular_artist=self.repository.most_popular_artist(),
            most_popular_song=self.repository.most_popular_song(),
            top_artists=self._rank([(a.name, a.likes) for a in artists], top_n),
            top_songs=self._rank([(s.title, s.likes) for s in songs], top_n),
        )

    @staticmethod
    def _rank(entries: List[Tuple[str, int]], top_n: int) -> List[Tuple[str, int]]:
        # sorted() is stable, so equal counts keep creation order
        return sorted(entries, key=lambda entry: entry[1], reverse=True)[:top_n]
