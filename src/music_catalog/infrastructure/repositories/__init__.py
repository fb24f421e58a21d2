"""
Repository Implementations.

Concrete implementations of the domain repository interfaces.
"""

from .catalog_repository import InMemoryCatalogRepository

__all__ = ["InMemoryCatalogRepository"]
