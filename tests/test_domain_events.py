"""Tests for domain events recorded by the catalog repository."""

import pytest

from music_catalog.events import (
    AlbumCreated,
    ArtistCreated,
    EventBus,
    ListenerAdded,
    PlaylistCreated,
    SongCreated,
    SongLiked,
    UserCreated,
)
from music_catalog.exceptions import NotFoundError
from music_catalog.infrastructure.repositories import InMemoryCatalogRepository
from music_catalog.models.config import Config, EventConfig


@pytest.fixture
def catalog():
    return InMemoryCatalogRepository()


class TestRecordedEvents:
    """Test which operations record which events."""

    def test_creation_events(self, catalog):
        catalog.create_user("Alice", "555")
        catalog.create_album("Album1", "Test")
        catalog.create_song("S1", "Album1", 200)

        events = catalog.pull_events()

        assert [type(e) for e in events] == [UserCreated, ArtistCreated, AlbumCreated, SongCreated]
        assert events[1].name == "Test"
        assert events[2].artist_name == "Test"
        assert events[3].album_title == "Album1"
        assert events[3].length == 200

    def test_pull_clears_pending(self, catalog):
        catalog.create_artist("Test")

        assert len(catalog.pull_events()) == 1
        assert catalog.pull_events() == []

    def test_aggregate_fields(self, catalog):
        song_album = catalog.create_album("Album1", "Test")
        catalog.pull_events()
        song = catalog.create_song("S1", "Album1", 200)

        event = catalog.pull_events()[0]

        assert event.aggregate_id == song.id
        assert event.aggregate_type == "Song"
        assert event.song_id == song.id
        assert song_album.id != song.id

    def test_playlist_and_listener_events(self, catalog):
        catalog.create_user("Alice", "555")
        catalog.create_user("Bob", "666")
        catalog.create_album("Album1", "Test")
        catalog.create_song("S1", "Album1", 200)
        catalog.pull_events()

        catalog.create_playlist_on_length("555", "Mix", 200)
        catalog.find_playlist("666", "Mix")
        catalog.find_playlist("666", "Mix")
        catalog.find_playlist("555", "Mix")

        events = catalog.pull_events()

        assert [type(e) for e in events] == [PlaylistCreated, ListenerAdded]
        assert events[0].criteria == "length"
        assert events[0].song_count == 1
        assert events[0].creator_mobile == "555"
        assert events[1].mobile == "666"

    def test_like_events_only_for_new_likes(self, catalog):
        catalog.create_user("Alice", "555")
        catalog.create_album("Album1", "Test")
        catalog.create_song("S1", "Album1", 200)
        catalog.pull_events()

        catalog.like_song("555", "S1")
        catalog.like_song("555", "S1")

        events = catalog.pull_events()

        assert len(events) == 1
        assert isinstance(events[0], SongLiked)
        assert events[0].artist_name == "Test"
        assert events[0].song_likes == 1

    def test_failures_record_nothing(self, catalog):
        with pytest.raises(NotFoundError):
            catalog.create_song("S1", "Missing", 200)
        with pytest.raises(NotFoundError):
            catalog.like_song("555", "S1")

        assert catalog.pull_events() == []

    def test_recording_disabled(self):
        catalog = InMemoryCatalogRepository(Config(events=EventConfig(record_events=False)))
        catalog.create_album("Album1", "Test")

        assert catalog.pull_events() == []

    def test_pending_events_bounded(self):
        catalog = InMemoryCatalogRepository(Config(events=EventConfig(max_events_in_memory=3)))
        for i in range(5):
            catalog.create_artist(f"Artist {i}")

        events = catalog.pull_events()

        assert [e.name for e in events] == ["Artist 2", "Artist 3", "Artist 4"]

    def test_event_serialization(self, catalog):
        catalog.create_user("Alice", "555")
        data = catalog.pull_events()[0].to_dict()

        assert data["event_type"] == "UserCreated"
        assert data["aggregate_type"] == "User"
        assert data["data"]["mobile"] == "555"
        assert data["data"]["name"] == "Alice"


class TestPublishing:
    """Test handing recorded events to the event bus."""

    @pytest.mark.asyncio
    async def test_publish_pulled_events(self, catalog):
        bus = EventBus()
        liked = []

        def on_like(event):
            liked.append(event.song_title)

        bus.subscribe(SongLiked, on_like)

        catalog.create_user("Alice", "555")
        catalog.create_album("Album1", "Test")
        catalog.create_song("S1", "Album1", 200)
        catalog.like_song("555", "S1")

        await bus.publish_batch(catalog.pull_events())

        assert liked == ["S1"]
        assert len(bus.get_events(event_type=SongLiked)) == 1
        assert [type(e).__name__ for e in bus.get_events()] == [
            "UserCreated", "ArtistCreated", "AlbumCreated", "SongCreated", "SongLiked",
        ]
