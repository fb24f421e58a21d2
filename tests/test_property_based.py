"""Property-based tests for the catalog repository.

Uses Hypothesis to generate catalogs and interaction sequences, and checks
the invariants that must hold whatever the callers do.
"""

from __future__ import annotations

from hypothesis import given, strategies as st

from music_catalog.infrastructure.repositories import InMemoryCatalogRepository


ALBUMS = ["A1", "A2", "A3"]
ARTISTS = ["X", "Y"]
TITLES = ["s1", "s2", "s3", "s4"]
MOBILES = ["m1", "m2", "m3"]

song_specs = st.lists(
    st.tuples(st.sampled_from(TITLES), st.sampled_from(ALBUMS), st.integers(min_value=1, max_value=4)),
    max_size=12,
)
likes = st.lists(st.tuples(st.sampled_from(MOBILES), st.sampled_from(TITLES)), max_size=30)


def build_catalog(songs) -> InMemoryCatalogRepository:
    catalog = InMemoryCatalogRepository()
    for mobile in MOBILES:
        catalog.create_user(mobile, mobile)
    for i, album in enumerate(ALBUMS):
        catalog.create_album(album, ARTISTS[i % len(ARTISTS)])
    for title, album, length in songs:
        catalog.create_song(title, album, length)
    return catalog


def like_all(catalog: InMemoryCatalogRepository, interactions) -> None:
    existing = {song.title for song in catalog.songs}
    for mobile, title in interactions:
        if title in existing:
            catalog.like_song(mobile, title)


# ============================================================================
# Like counters
# ============================================================================

@given(song_specs, likes)
def test_song_likes_equal_distinct_likers(songs, interactions) -> None:
    """A song's like counter always equals its number of distinct likers."""
    catalog = build_catalog(songs)
    like_all(catalog, interactions)

    for song in catalog.songs:
        likers = catalog.get_song_likers(song)
        assert song.likes == len(likers)
        assert len({id(u) for u in likers}) == len(likers)


@given(song_specs, likes)
def test_artist_likes_equal_song_likes(songs, interactions) -> None:
    """Every new like on a song credits exactly one artist."""
    catalog = build_catalog(songs)
    like_all(catalog, interactions)

    for artist in catalog.artists:
        owned = [
            song
            for album in catalog.get_artist_albums(artist)
            for song in catalog.get_album_songs(album)
        ]
        assert artist.likes == sum(song.likes for song in owned)


@given(song_specs, likes)
def test_repeating_likes_changes_nothing(songs, interactions) -> None:
    """Replaying the same likes a second time leaves every counter as it was."""
    catalog = build_catalog(songs)
    like_all(catalog, interactions)
    before = [s.likes for s in catalog.songs] + [a.likes for a in catalog.artists]

    like_all(catalog, interactions)
    after = [s.likes for s in catalog.songs] + [a.likes for a in catalog.artists]

    assert before == after


# ============================================================================
# Playlists
# ============================================================================

@given(song_specs, st.integers(min_value=0, max_value=5))
def test_length_playlist_is_filtered_catalog(songs, length) -> None:
    """A length playlist is exactly the catalog songs of that length, in order."""
    catalog = build_catalog(songs)
    playlist = catalog.create_playlist_on_length("m1", "p", length)

    expected = [song for song in catalog.songs if song.length == length]
    assert catalog.get_playlist_songs(playlist) == expected


@given(song_specs, st.lists(st.sampled_from(TITLES + ["missing"])))
def test_name_playlist_is_filtered_catalog(songs, titles) -> None:
    """A name playlist is exactly the catalog songs with a listed title, in order."""
    catalog = build_catalog(songs)
    playlist = catalog.create_playlist_on_name("m1", "p", titles)

    expected = [song for song in catalog.songs if song.title in titles]
    assert catalog.get_playlist_songs(playlist) == expected


@given(st.lists(st.sampled_from(MOBILES), max_size=20))
def test_listeners_unique_and_start_with_creator(visitors) -> None:
    """Listeners never repeat and the creator always comes first."""
    catalog = build_catalog([])
    playlist = catalog.create_playlist_on_length("m2", "p", 1)
    for mobile in visitors:
        catalog.find_playlist(mobile, "p")

    listeners = catalog.get_playlist_listeners(playlist)
    assert listeners[0] is catalog.find_user("m2")
    assert len({id(u) for u in listeners}) == len(listeners)
    assert {u.mobile for u in listeners} == {"m2", *visitors}
