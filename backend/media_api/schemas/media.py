"""Media Schemas — open pydantic models for schema-less media records.

Invariants:
    - Request bodies must be JSON objects; any keys allowed
    - Response records always carry a string id plus the caller's fields
    - An "id" key in a request body is accepted but ignored by the store

Design Decisions:
    - extra="allow" over dict[str, Any] bodies: keeps OpenAPI docs and the
      familiar title/type/url hints while staying schema-less
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MediaFieldsIn(BaseModel):
    """Create/update body — arbitrary fields, common ones documented."""
    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "examples": [
                {"title": "Sunset", "type": "image", "url": "https://example.com/sunset.jpg"},
            ],
        },
    )

    def to_fields(self) -> dict[str, Any]:
        """Client-sent keys as a plain dict (no declared fields, so extras only)."""
        return self.model_dump()


class MediaRecordOut(BaseModel):
    """Stored record — id plus whatever fields the client supplied."""
    model_config = ConfigDict(extra="allow")

    id: str = Field(min_length=1)
