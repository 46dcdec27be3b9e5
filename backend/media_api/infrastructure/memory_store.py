"""In-Memory Media Store — ordered record list with lock-guarded linear scans.

Invariants:
    - Records kept in insertion order; list_all reflects mutations immediately
    - Every operation holds the store lock for its whole scan-and-mutate
    - Records are deep-copied on the way in and out; no caller shares a
      nested list or dict with the store
    - Ids unique among live records (timestamp bumped on collision)

Design Decisions:
    - threading.Lock over asyncio.Lock: the lock is never held across an
      await, so async handlers take it briefly on the event loop, and it also
      guards threadpool or other multi-threaded callers
    - Singleton store initialized on startup, same lifecycle as a DB manager:
      init_store() in lifespan, get_store() as the FastAPI dependency
"""

import logging
import threading
import time
from collections.abc import Callable, Mapping
from copy import deepcopy
from typing import Any

from media_api.core.domain_types import ID_FIELD, MediaRecord
from media_api.core.errors import StoreNotInitializedError
from media_api.core.media_records import (
    build_record, index_of, merge_fields, next_media_id,
)

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class InMemoryMediaStore:
    """Process-local MediaRepository backed by a Python list."""

    def __init__(self, clock: Callable[[], int] = _now_ms):
        self._records: list[MediaRecord] = []
        self._lock = threading.Lock()
        self._clock = clock

    def create(self, fields: Mapping[str, Any]) -> MediaRecord:
        with self._lock:
            taken = {r[ID_FIELD] for r in self._records}
            media_id = next_media_id(self._clock(), taken)
            record = build_record(media_id, deepcopy(dict(fields)))
            self._records.append(record)
            count = len(self._records)
        logger.info(
            f"Media {media_id} created",
            extra={"media_id": media_id, "record_count": count},
        )
        return deepcopy(record)

    def find_by_id(self, media_id: str) -> MediaRecord | None:
        with self._lock:
            i = index_of(self._records, media_id)
            found = deepcopy(self._records[i]) if i is not None else None
        if found is None:
            logger.debug(f"Media {media_id} not found", extra={"media_id": media_id})
        return found

    def update(
        self, media_id: str, fields: Mapping[str, Any],
    ) -> MediaRecord | None:
        with self._lock:
            i = index_of(self._records, media_id)
            if i is None:
                merged = None
            else:
                merged = merge_fields(self._records[i], deepcopy(dict(fields)))
                self._records[i] = merged
        if merged is None:
            logger.debug(
                f"Media {media_id} not found for update",
                extra={"media_id": media_id},
            )
            return None
        logger.info(f"Media {media_id} updated", extra={"media_id": media_id})
        return deepcopy(merged)

    def delete(self, media_id: str) -> MediaRecord | None:
        with self._lock:
            i = index_of(self._records, media_id)
            removed = self._records.pop(i) if i is not None else None
            count = len(self._records)
        if removed is None:
            logger.debug(
                f"Media {media_id} not found for delete",
                extra={"media_id": media_id},
            )
            return None
        logger.info(
            f"Media {media_id} deleted",
            extra={"media_id": media_id, "record_count": count},
        )
        return removed

    def list_all(self) -> list[MediaRecord]:
        with self._lock:
            return [deepcopy(r) for r in self._records]

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()


# Singleton (initialized on startup)
media_store: InMemoryMediaStore | None = None


def init_store(**kwargs) -> InMemoryMediaStore:
    global media_store
    media_store = InMemoryMediaStore(**kwargs)
    return media_store


def close_store() -> None:
    global media_store
    if media_store is not None:
        media_store.clear()
    media_store = None


def get_store() -> InMemoryMediaStore:
    """FastAPI dependency for the media store."""
    if media_store is None:
        raise StoreNotInitializedError()
    return media_store
