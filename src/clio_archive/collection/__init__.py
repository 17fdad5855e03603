"""Saved-collection persistence."""

from .storage import JsonFileStorage
from .store import SavedCollection

__all__ = [
    "JsonFileStorage",
    "SavedCollection",
]
