"""Boundary Protocols — contract between the HTTP layer and record storage.

Invariants:
    - Handlers depend on MediaRepository, never on a concrete store
    - Absence is returned as None, never raised

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous methods: the only implementation is in-process; a persistent
      backend can satisfy the same contract behind its own session handling
"""

from typing import Any, Mapping, Protocol

from media_api.core.domain_types import MediaRecord


class MediaRepository(Protocol):
    """Contract for media record storage — implemented by infrastructure."""
    def create(self, fields: Mapping[str, Any]) -> MediaRecord: ...
    def find_by_id(self, media_id: str) -> MediaRecord | None: ...
    def update(
        self, media_id: str, fields: Mapping[str, Any],
    ) -> MediaRecord | None: ...
    def delete(self, media_id: str) -> MediaRecord | None: ...
    def list_all(self) -> list[MediaRecord]: ...
    def count(self) -> int: ...
    def clear(self) -> None: ...
