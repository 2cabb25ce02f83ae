"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - MediaId wraps int; ids are allocated by the store, never by callers
    - All valid media formats encoded as an Enum, not raw string lists

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: values serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

MediaId = NewType("MediaId", int)


# ─── Limits ──────────────────────────────────────────────────────

NAME_MAX_LENGTH = 40
DESC_MAX_LENGTH = 200

MEDIA_PATH_PREFIX = "/media"


# ─── Enums ───────────────────────────────────────────────────────

class MediaType(str, Enum):
    """Obsolete physical media formats the catalog accepts."""
    TAPE = "TAPE"
    CD = "CD"
    DVD = "DVD"
