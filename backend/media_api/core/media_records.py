"""Media Records — pure functions for id generation, record building and merging.

Invariants:
    - Generated ids are timestamp text; collisions resolved by bumping 1 ms
    - Caller-supplied "id" keys never reach a record (ids are store-assigned)
    - merge_fields never mutates its inputs

Design Decisions:
    - Clock value passed in, not read here: keeps core deterministic and testable
"""

from collections.abc import Container, Mapping
from typing import Any

from media_api.core.domain_types import ID_FIELD, MediaFields, MediaId, MediaRecord


def format_media_id(timestamp_ms: int) -> MediaId:
    """Render a millisecond timestamp as a MediaId."""
    return MediaId(str(timestamp_ms))


def next_media_id(timestamp_ms: int, taken: Container[str]) -> MediaId:
    """First free id at or after timestamp_ms.

    Two creations inside the same millisecond would otherwise share an id.
    """
    candidate = timestamp_ms
    while format_media_id(candidate) in taken:
        candidate += 1
    return format_media_id(candidate)


def strip_reserved(fields: Mapping[str, Any]) -> MediaFields:
    """Drop keys the caller may not set."""
    return {k: v for k, v in fields.items() if k != ID_FIELD}


def build_record(media_id: MediaId, fields: Mapping[str, Any]) -> MediaRecord:
    """New record: generated id first, then caller fields in their order."""
    return {ID_FIELD: media_id, **strip_reserved(fields)}


def merge_fields(record: Mapping[str, Any], fields: Mapping[str, Any]) -> MediaRecord:
    """Shallow merge: key-by-key overwrite, unspecified keys untouched."""
    return {**record, **strip_reserved(fields)}


def index_of(records: list[MediaRecord], media_id: str) -> int | None:
    """Linear scan for the first record with the given id."""
    for i, record in enumerate(records):
        if record.get(ID_FIELD) == media_id:
            return i
    return None
