#!/usr/bin/env python3
"""
Example demonstrating the Music Catalog store.

This example shows:
1. Building a catalog of artists, albums and songs
2. Creating playlists and liking songs
3. Publishing the recorded domain events through the event bus
4. Rendering popularity statistics
"""

import asyncio

from music_catalog import InMemoryCatalogRepository, NotFoundError
from music_catalog.dashboard import CatalogDashboard
from music_catalog.events import EventBus, PlaylistCreated, SongCreated, SongLiked


async def main():
    catalog = InMemoryCatalogRepository()
    bus = EventBus()

    def on_song(event: SongCreated) -> None:
        print(f"  event: {event.__class__.__name__} {event.to_dict()['data']}")

    async def on_like(event: SongLiked) -> None:
        print(f"  {event.mobile} liked {event.song_title} (artist: {event.artist_name})")

    bus.subscribe(SongCreated, on_song)
    bus.subscribe(PlaylistCreated, lambda e: print(f"  playlist {e.title}: {e.song_count} songs"))
    bus.subscribe(SongLiked, on_like)

    print("Building catalog...")
    catalog.create_user("Ada", "555-0100")
    catalog.create_user("Linus", "555-0101")
    catalog.create_album("Blue Train", "John Coltrane")
    catalog.create_album("Kind of Blue", "Miles Davis")
    catalog.create_song("Moment's Notice", "Blue Train", 546)
    catalog.create_song("So What", "Kind of Blue", 562)
    catalog.create_song("Blue in Green", "Kind of Blue", 337)
    await bus.publish_pending(catalog)

    print("\nPlaylists and likes...")
    catalog.create_playlist_on_name("555-0100", "Jazz Hits", ["So What", "Moment's Notice"])
    catalog.find_playlist("555-0101", "Jazz Hits")
    catalog.like_song("555-0100", "So What")
    catalog.like_song("555-0101", "So What")
    catalog.like_song("555-0101", "Blue in Green")
    await bus.publish_pending(catalog)

    try:
        catalog.create_song("Giant Steps", "Giant Steps", 286)
    except NotFoundError as e:
        print(f"\nExpected failure: {e}")

    print()
    CatalogDashboard().show(catalog)


if __name__ == "__main__":
    asyncio.run(main())
