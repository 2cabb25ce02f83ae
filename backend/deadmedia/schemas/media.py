"""Media Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - MediaEntry.name: str, max 40 chars (no coercion from numbers)
    - MediaEntry.type: one of MediaType
    - MediaEntry.desc: str, max 200 chars
    - Extra fields in request bodies are ignored (peers POST whole records, id included)

Design Decisions:
    - strict=True on the string fields: {"name": 9} must be rejected, not coerced
    - One schema drives both request validation and the is_valid_entry predicate
"""

from pydantic import BaseModel, Field

from deadmedia.core.domain_types import (
    DESC_MAX_LENGTH, NAME_MAX_LENGTH, MediaType,
)


class MediaEntry(BaseModel):
    """Create/update body — the three mutable fields of a record."""
    name: str = Field(strict=True, max_length=NAME_MAX_LENGTH)
    type: MediaType
    desc: str = Field(strict=True, max_length=DESC_MAX_LENGTH)


class MediaResponse(BaseModel):
    """Wire representation — id is the canonical resource path."""
    id: str
    name: str
    type: str
    desc: str


class MediaPage(BaseModel):
    """Paginated listing with navigation links."""
    count: int
    next: str | None
    previous: str | None
    results: list[MediaResponse]


class TransferRequest(BaseModel):
    """Move the record at `source` to the collection at `target`."""
    source: str = Field(strict=True)
    target: str = Field(strict=True)
