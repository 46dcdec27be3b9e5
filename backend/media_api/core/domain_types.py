"""Domain Types — named types for media identity and records.

Invariants:
    - MediaId is the decimal text of a millisecond Unix timestamp
    - MediaRecord is a plain JSON object; "id" is the only reserved key

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Records stay dicts: fields are schema-less and caller-defined
"""

from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

MediaId = NewType("MediaId", str)


# ─── Record Types ────────────────────────────────────────────────

MediaFields = dict[str, Any]
MediaRecord = dict[str, Any]

ID_FIELD = "id"
