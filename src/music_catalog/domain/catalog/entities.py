"""Catalog Context Entities.

This module defines the core entities for the Catalog bounded context.
Entities are compared by identity: two artists sharing a name are still
two artists, and each can key its own entry in the relationship tables.
Relationships between entities are not stored on the entities themselves
but in the tables owned by the catalog repository.
"""

from dataclasses import dataclass, field
from typing import Any, Dict
from uuid import uuid4


def _new_id() -> str:
    return str(uuid4())


@dataclass(eq=False)
class Artist:
    """
    Represents a musical artist or group.

    An artist's likes are credited whenever one of its songs receives a
    like from a user who had not liked that song before.
    """

    name: str
    likes: int = 0

    id: str = field(default_factory=_new_id, repr=False)

    def register_like(self) -> None:
        """Credit one like to the artist."""
        self.likes += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert artist to dictionary."""
        return {"id": self.id, "name": self.name, "likes": self.likes}


@dataclass(eq=False)
class Album:
    """Represents an album owned by exactly one artist."""

    title: str

    id: str = field(default_factory=_new_id, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert album to dictionary."""
        return {"id": self.id, "title": self.title}


@dataclass(eq=False)
class Song:
    """
    Represents a single song on an album.

    The like counter always equals the number of distinct users who
    liked the song.
    """

    title: str
    length: int
    likes: int = 0

    id: str = field(default_factory=_new_id, repr=False)

    def register_like(self) -> None:
        """Count one more distinct liker."""
        self.likes += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert song to dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "length": self.length,
            "likes": self.likes,
        }


@dataclass(eq=False)
class Playlist:
    """Represents a user-created playlist."""

    title: str

    id: str = field(default_factory=_new_id, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert playlist to dictionary."""
        return {"id": self.id, "title": self.title}


@dataclass(eq=False)
class User:
    """
    Represents a listener.

    The mobile number is the key users are looked up by. It is not
    enforced unique; lookups return the first user registered with it.
    """

    name: str
    mobile: str

    id: str = field(default_factory=_new_id, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert user to dictionary."""
        return {"id": self.id, "name": self.name, "mobile": self.mobile}
