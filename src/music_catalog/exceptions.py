"""Custom exceptions for music catalog."""


class MusicCatalogError(Exception):
    """Base exception for music catalog errors."""
    pass


class NotFoundError(MusicCatalogError):
    """Raised when a lookup by name, title or mobile finds no entity."""

    def __init__(self, entity: str, key: str, field: str = "name"):
        self.entity = entity
        self.field = field
        self.key = key
        super().__init__(f"{entity.capitalize()} with {field} '{key}' does not exist")


class ConfigurationError(MusicCatalogError):
    """Raised when there's an error in configuration."""
    pass
