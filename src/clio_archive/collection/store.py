"""The user's saved sources, deduplicated by URL and persisted on every change."""

import json
import logging
import threading
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from ..config import SAVED_SOURCES_KEY, StorageSettings
from ..research.models import Source
from .storage import JsonFileStorage

logger = logging.getLogger(__name__)

_SOURCE_LIST = TypeAdapter(list[Source])


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


class SavedCollection:
    """Saved sources keyed by URL.

    Loaded once at construction; unreadable stored data yields an empty
    collection. Every mutation writes the whole collection back before
    returning. If that write fails, PersistenceError is raised but the
    in-memory collection keeps the change and stays authoritative for the
    session. Entries are never purged automatically.
    """

    def __init__(self, storage: KeyValueStorage, key: str = SAVED_SOURCES_KEY):
        self.storage = storage
        self.key = key
        # Serializes mutations so the one-entry-per-URL rule holds across threads.
        self._lock = threading.Lock()
        self._sources: list[Source] = self._load()

    @classmethod
    def from_settings(cls, storage_settings: StorageSettings) -> "SavedCollection":
        return cls(JsonFileStorage(storage_settings.get_path()), key=storage_settings.saved_sources_key)

    def _load(self) -> list[Source]:
        raw = self.storage.get_item(self.key)
        if raw is None:
            return []

        try:
            sources = _SOURCE_LIST.validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Discarding unreadable saved collection under {self.key!r}: {e.error_count()} error(s)")
            return []

        # Stored data written by older versions may hold repeated URLs.
        deduped: dict[str, Source] = {}
        for source in sources:
            deduped.setdefault(source.url, source)
        logger.debug(f"Loaded {len(deduped)} saved source(s)")
        return list(deduped.values())

    def _persist(self) -> None:
        payload = json.dumps([s.to_wire() for s in self._sources], ensure_ascii=False)
        self.storage.set_item(self.key, payload)

    @property
    def sources(self) -> list[Source]:
        """Snapshot of saved sources in the order they were saved."""
        return list(self._sources)

    def __len__(self) -> int:
        return len(self._sources)

    def is_saved(self, url: str) -> bool:
        return any(s.url == url for s in self._sources)

    def toggle(self, source: Source) -> bool:
        """Save or unsave a source.

        - URL not saved: the source is appended.
        - Same URL with an identical entry: the entry is removed.
        - Same URL with a different entry: the entry is replaced in place,
          so the newest toggle wins and the URL stays unique.

        Returns:
            True if the URL is saved after the call.

        Raises:
            PersistenceError: If the collection could not be written
        """
        with self._lock:
            index = next((i for i, s in enumerate(self._sources) if s.url == source.url), None)
            if index is None:
                self._sources.append(source)
                saved = True
            elif self._sources[index] == source:
                del self._sources[index]
                saved = False
            else:
                self._sources[index] = source
                saved = True

            logger.info(f"{'Saved' if saved else 'Removed'} source: {source.url}")
            self._persist()
            return saved
