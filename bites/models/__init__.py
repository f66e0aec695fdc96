"""Convenience exports for in-memory domain records."""
from .author import Author, Collection, build_collection
from .bite import Item, MediaRef, MediaType

__all__ = [
    "Author",
    "Collection",
    "build_collection",
    "Item",
    "MediaRef",
    "MediaType",
]
