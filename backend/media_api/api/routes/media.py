"""Media Routes — CRUD endpoints over the injected MediaRepository.

Invariants:
    - Each handler performs exactly one store operation
    - Default mode: unknown ids give 200 + null (fetch/update) and 204 (delete)
    - Strict mode (settings.strict_not_found): unknown ids raise MediaNotFoundError → 404
    - Delete never returns a body

Design Decisions:
    - Store and settings come from Depends: tests swap either without patching modules
    - Paths kept verbatim (/media/upload, /media/{id}/update, /medias) for
      compatibility with existing clients
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from media_api.config import Settings, get_settings
from media_api.core.domain_types import MediaRecord
from media_api.core.errors import MediaNotFoundError
from media_api.core.repository_protocols import MediaRepository
from media_api.infrastructure.memory_store import get_store
from media_api.schemas.media import MediaFieldsIn, MediaRecordOut

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["media"])


def _found_or_absent(
    record: MediaRecord | None, media_id: str, settings: Settings,
) -> MediaRecord | None:
    if record is None and settings.strict_not_found:
        raise MediaNotFoundError(media_id)
    return record


@router.post(
    "/media/upload", response_model=MediaRecordOut,
    status_code=status.HTTP_201_CREATED,
)
async def upload_media(
    body: MediaFieldsIn, store: MediaRepository = Depends(get_store),
):
    """Create a media record from arbitrary JSON fields."""
    return store.create(body.to_fields())


@router.get("/media/{media_id}", response_model=MediaRecordOut | None)
async def get_media(
    media_id: str,
    store: MediaRepository = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """Fetch one record; null when absent."""
    return _found_or_absent(store.find_by_id(media_id), media_id, settings)


@router.put("/media/{media_id}/update", response_model=MediaRecordOut | None)
async def update_media(
    media_id: str,
    body: MediaFieldsIn,
    store: MediaRepository = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """Shallow-merge body fields into a record; null when absent."""
    return _found_or_absent(
        store.update(media_id, body.to_fields()), media_id, settings,
    )


@router.delete(
    "/media/{media_id}/delete", status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_media(
    media_id: str,
    store: MediaRepository = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """Remove a record. 204 whether or not it existed (unless strict)."""
    _found_or_absent(store.delete(media_id), media_id, settings)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/medias", response_model=list[MediaRecordOut])
async def list_media(store: MediaRepository = Depends(get_store)):
    """All records in creation order."""
    return store.list_all()
