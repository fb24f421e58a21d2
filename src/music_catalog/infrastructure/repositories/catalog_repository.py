"""
Catalog Repository Implementations.

This module provides the in-memory implementation of the catalog
repository. It owns the five entity collections and the seven
relationship tables between them.

The repository is not thread-safe unless created with
``config.store.thread_safe`` enabled, in which case every public
operation runs under a single re-entrant lock.
"""

import logging
import threading
from contextlib import nullcontext
from typing import Callable, Dict, Iterable, List, Optional, TypeVar

from ...domain.catalog.entities import Album, Artist, Playlist, Song, User
from ...domain.catalog.repositories import CatalogRepository
from ...events.event_bus import DomainEvent
from ...events.domain_events import (
    AlbumCreated,
    ArtistCreated,
    ListenerAdded,
    PlaylistCreated,
    SongCreated,
    SongLiked,
    UserCreated,
)
from ...exceptions import NotFoundError
from ...models.config import Config

logger = logging.getLogger(__name__)

E = TypeVar("E")


def _first(items: Iterable[E], predicate: Callable[[E], bool]) -> Optional[E]:
    """Return the first item matching predicate, in iteration order."""
    return next((item for item in items if predicate(item)), None)


class InMemoryCatalogRepository(CatalogRepository):
    """In-memory catalog store.

    Lookups by name, title or mobile scan in creation order and return the
    first match, so duplicate names are allowed and the oldest one wins.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config.default()
        self._lock = threading.RLock() if self.config.store.thread_safe else nullcontext()

        self._users: List[User] = []
        self._artists: List[Artist] = []
        self._albums: List[Album] = []
        self._songs: List[Song] = []
        self._playlists: List[Playlist] = []

        self._artist_albums: Dict[Artist, List[Album]] = {}
        self._album_songs: Dict[Album, List[Song]] = {}
        self._playlist_songs: Dict[Playlist, List[Song]] = {}
        self._playlist_listeners: Dict[Playlist, List[User]] = {}
        self._creator_playlist: Dict[User, Playlist] = {}
        self._user_playlists: Dict[User, List[Playlist]] = {}
        self._song_likers: Dict[Song, List[User]] = {}

        self._pending_events: List[DomainEvent] = []

    # Creation

    def create_user(self, name: str, mobile: str) -> User:
        """Register a new user. Duplicate mobiles are accepted."""
        with self._lock:
            user = User(name, mobile)
            self._users.append(user)
            logger.debug("Created user %r (%s)", name, mobile)
            self._record(UserCreated(
                aggregate_id=user.id, aggregate_type="User",
                user_id=user.id, name=name, mobile=mobile,
            ))
            return user

    def create_artist(self, name: str) -> Artist:
        """Register a new artist. Duplicate names are accepted."""
        with self._lock:
            artist = Artist(name)
            self._artists.append(artist)
            logger.debug("Created artist %r", name)
            self._record(ArtistCreated(
                aggregate_id=artist.id, aggregate_type="Artist",
                artist_id=artist.id, name=name,
            ))
            return artist

    def create_album(self, title: str, artist_name: str) -> Album:
        """Register an album under the named artist.

        An unknown artist is created on the spot rather than rejected.
        """
        with self._lock:
            artist = _first(self._artists, lambda a: a.name == artist_name)
            if artist is None:
                artist = self.create_artist(artist_name)

            album = Album(title)
            self._albums.append(album)
            self._artist_albums.setdefault(artist, []).append(album)
            logger.debug("Created album %r by %r", title, artist_name)
            self._record(AlbumCreated(
                aggregate_id=album.id, aggregate_type="Album",
                album_id=album.id, title=title, artist_name=artist.name,
            ))
            return album

    def create_song(self, title: str, album_name: str, length: int) -> Song:
        """Register a song on the first album titled ``album_name``.

        Raises:
            NotFoundError: If no album has that title.
        """
        with self._lock:
            album = _first(self._albums, lambda a: a.title == album_name)
            if album is None:
                raise NotFoundError("album", album_name, field="title")

            song = Song(title, length)
            self._songs.append(song)
            self._album_songs.setdefault(album, []).append(song)
            logger.debug("Created song %r (%ds) on album %r", title, length, album_name)
            self._record(SongCreated(
                aggregate_id=song.id, aggregate_type="Song",
                song_id=song.id, title=title, album_title=album.title, length=length,
            ))
            return song

    def create_playlist_on_length(self, mobile: str, title: str, length: int) -> Playlist:
        """Create a playlist seeded with every song of exactly ``length`` seconds."""
        with self._lock:
            user = self.find_user(mobile)
            songs = [song for song in self._songs if song.length == length]
            return self._register_playlist(user, title, songs, criteria="length")

    def create_playlist_on_name(self, mobile: str, title: str, song_titles: List[str]) -> Playlist:
        """Create a playlist seeded with every song whose title is in ``song_titles``.

        Songs keep catalog creation order, not the order of ``song_titles``,
        and a listed title picks up every song sharing it.
        """
        with self._lock:
            user = self.find_user(mobile)
            wanted = set(song_titles)
            songs = [song for song in self._songs if song.title in wanted]
            return self._register_playlist(user, title, songs, criteria="name")

    def _register_playlist(self, creator: User, title: str, songs: List[Song], criteria: str) -> Playlist:
        playlist = Playlist(title)
        self._playlists.append(playlist)
        self._playlist_songs[playlist] = songs
        self._playlist_listeners[playlist] = [creator]
        self._creator_playlist[creator] = playlist
        self._user_playlists.setdefault(creator, []).append(playlist)
        logger.debug(
            "User %s created playlist %r with %d songs (by %s)",
            creator.mobile, title, len(songs), criteria,
        )
        self._record(PlaylistCreated(
            aggregate_id=playlist.id, aggregate_type="Playlist",
            playlist_id=playlist.id, title=title, creator_mobile=creator.mobile,
            song_count=len(songs), criteria=criteria,
        ))
        return playlist

    # Interaction

    def find_playlist(self, mobile: str, playlist_title: str) -> Playlist:
        """Find a playlist by title and add the user to its listeners.

        Calling again with the same user leaves the listeners unchanged.

        Raises:
            NotFoundError: If the user or the playlist does not exist.
        """
        with self._lock:
            user = self.find_user(mobile)
            playlist = _first(self._playlists, lambda p: p.title == playlist_title)
            if playlist is None:
                raise NotFoundError("playlist", playlist_title, field="title")

            listeners = self._playlist_listeners.setdefault(playlist, [])
            if user not in listeners:
                listeners.append(user)
                logger.debug("User %s now listens to %r", mobile, playlist_title)
                self._record(ListenerAdded(
                    aggregate_id=playlist.id, aggregate_type="Playlist",
                    playlist_id=playlist.id, playlist_title=playlist.title, mobile=mobile,
                ))
            return playlist

    def like_song(self, mobile: str, song_title: str) -> Song:
        """Record a user's like on a song and credit the song's artist.

        A user liking the same song again changes nothing.

        Raises:
            NotFoundError: If the user or the song does not exist.
        """
        with self._lock:
            user = self.find_user(mobile)
            song = self.find_song(song_title)

            likers = self._song_likers.setdefault(song, [])
            if user in likers:
                return song

            likers.append(user)
            song.register_like()

            artist = None
            album = self.get_song_album(song)
            if album is not None:
                artist = self.get_album_artist(album)
            if artist is not None:
                artist.register_like()
            else:
                logger.debug("No owning artist for song %r; artist like skipped", song_title)

            logger.debug("User %s liked %r (%d likes)", mobile, song_title, song.likes)
            self._record(SongLiked(
                aggregate_id=song.id, aggregate_type="Song",
                song_id=song.id, song_title=song.title, mobile=mobile,
                song_likes=song.likes, artist_name=artist.name if artist else None,
            ))
            return song

    # Aggregates

    def most_popular_artist(self) -> Optional[str]:
        """Name of the most liked artist, or None without artists.

        Ties go to the artist created first.
        """
        with self._lock:
            if not self._artists:
                return None
            return max(self._artists, key=lambda a: a.likes).name

    def most_popular_song(self) -> Optional[str]:
        """Title of the most liked song, or None without songs.

        Ties go to the song created first.
        """
        with self._lock:
            if not self._songs:
                return None
            return max(self._songs, key=lambda s: s.likes).title

    # Lookups

    def find_user(self, mobile: str) -> User:
        """First user registered with ``mobile``."""
        with self._lock:
            user = _first(self._users, lambda u: u.mobile == mobile)
            if user is None:
                raise NotFoundError("user", mobile, field="mobile")
            return user

    def find_artist(self, name: str) -> Artist:
        """First artist registered as ``name``."""
        with self._lock:
            artist = _first(self._artists, lambda a: a.name == name)
            if artist is None:
                raise NotFoundError("artist", name)
            return artist

    def find_album(self, title: str) -> Album:
        """First album titled ``title``."""
        with self._lock:
            album = _first(self._albums, lambda a: a.title == title)
            if album is None:
                raise NotFoundError("album", title, field="title")
            return album

    def find_song(self, title: str) -> Song:
        """First song titled ``title``."""
        with self._lock:
            song = _first(self._songs, lambda s: s.title == title)
            if song is None:
                raise NotFoundError("song", title, field="title")
            return song

    @property
    def users(self) -> List[User]:
        with self._lock:
            return list(self._users)

    @property
    def artists(self) -> List[Artist]:
        with self._lock:
            return list(self._artists)

    @property
    def albums(self) -> List[Album]:
        with self._lock:
            return list(self._albums)

    @property
    def songs(self) -> List[Song]:
        with self._lock:
            return list(self._songs)

    @property
    def playlists(self) -> List[Playlist]:
        with self._lock:
            return list(self._playlists)

    # Relationships

    def get_artist_albums(self, artist: Artist) -> List[Album]:
        with self._lock:
            return list(self._artist_albums.get(artist, []))

    def get_album_songs(self, album: Album) -> List[Song]:
        with self._lock:
            return list(self._album_songs.get(album, []))

    def get_playlist_songs(self, playlist: Playlist) -> List[Song]:
        with self._lock:
            return list(self._playlist_songs.get(playlist, []))

    def get_playlist_listeners(self, playlist: Playlist) -> List[User]:
        with self._lock:
            return list(self._playlist_listeners.get(playlist, []))

    def get_song_likers(self, song: Song) -> List[User]:
        with self._lock:
            return list(self._song_likers.get(song, []))

    def get_created_playlist(self, user: User) -> Optional[Playlist]:
        """The playlist ``user`` created most recently, if any."""
        with self._lock:
            return self._creator_playlist.get(user)

    def get_user_playlists(self, user: User) -> List[Playlist]:
        """Every playlist ``user`` created, oldest first."""
        with self._lock:
            return list(self._user_playlists.get(user, []))

    def get_song_album(self, song: Song) -> Optional[Album]:
        """First album whose song list contains ``song``."""
        with self._lock:
            return _first(self._album_songs, lambda album: song in self._album_songs[album])

    def get_album_artist(self, album: Album) -> Optional[Artist]:
        """First artist whose album list contains ``album``."""
        with self._lock:
            return _first(self._artist_albums, lambda artist: album in self._artist_albums[artist])

    # Events

    def pull_events(self) -> List[DomainEvent]:
        """Return the events recorded since the last pull and forget them."""
        with self._lock:
            events, self._pending_events = self._pending_events, []
            return events

    def _record(self, event: DomainEvent) -> None:
        if not self.config.events.record_events:
            return
        self._pending_events.append(event)
        overflow = len(self._pending_events) - self.config.events.max_events_in_memory
        if overflow > 0:
            del self._pending_events[:overflow]
