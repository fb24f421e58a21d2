"""Infrastructure layer for the music catalog."""

from . import repositories
