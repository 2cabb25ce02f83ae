"""Pagination & Filtering — pure page computation with navigation links.

Invariants:
    - Filters are exact, case-sensitive, AND-combined, order-preserving
    - count is the size of the filtered collection, not of the page
    - next link iff offset + limit < count
    - previous link iff offset - max(0, offset - limit) > 0
    - Every link carries all active filters (name, type, desc order) before limit/offset

Design Decisions:
    - Out-of-range offsets are not clamped: the link formulas apply verbatim and
      the route turns the resulting empty page into 204
    - limit=0 falls back to the default (whole collection), like absent/empty values
    - Links are percent-encoded so filter values with spaces round-trip
"""

import re
from dataclasses import dataclass, field
from urllib.parse import quote, urlencode

from deadmedia.core.domain_types import MEDIA_PATH_PREFIX
from deadmedia.core.errors import InvalidPaginationError
from deadmedia.core.formatter import format_media
from deadmedia.core.media_record import MediaRecord

_INTEGER = re.compile(r"-?\d+")


@dataclass(frozen=True)
class MediaFilters:
    """Equality filters from the query string; empty values are inactive."""
    name: str | None = None
    type: str | None = None
    desc: str | None = None

    def active(self) -> list[tuple[str, str]]:
        return [
            (key, value)
            for key, value in (
                ("name", self.name), ("type", self.type), ("desc", self.desc),
            )
            if value
        ]

    def matches(self, record: MediaRecord) -> bool:
        return all(
            getattr(record, key) == value for key, value in self.active()
        )


@dataclass
class PageResult:
    count: int
    next: str | None
    previous: str | None
    results: list[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "next": self.next,
            "previous": self.previous,
            "results": self.results,
        }


def _parse_non_negative(parameter: str, raw: str | None, default: int) -> int:
    if raw is None or raw == "":
        return default
    if not _INTEGER.fullmatch(raw):
        raise InvalidPaginationError(parameter, raw)
    value = int(raw)
    if value < 0:
        raise InvalidPaginationError(parameter, raw)
    return value


def parse_page_params(
    raw_limit: str | None, raw_offset: str | None, total: int,
) -> tuple[int, int]:
    """Parse limit/offset query strings. Default limit is the whole collection."""
    limit = _parse_non_negative("limit", raw_limit, total) or total
    offset = _parse_non_negative("offset", raw_offset, 0)
    return limit, offset


def build_page_link(filters: MediaFilters, limit: int, offset: int) -> str:
    params = filters.active() + [("limit", str(limit)), ("offset", str(offset))]
    return f"{MEDIA_PATH_PREFIX}?{urlencode(params, quote_via=quote)}"


def paginate(
    records: list[MediaRecord],
    filters: MediaFilters,
    limit: int,
    offset: int,
) -> PageResult:
    """Filter, slice and link one page of records."""
    filtered = [record for record in records if filters.matches(record)]
    total_count = len(filtered)
    page = filtered[offset:offset + limit]

    next_link = None
    if offset + limit < total_count:
        next_link = build_page_link(filters, limit, offset + limit)

    previous_offset = max(0, offset - limit)
    previous_limit = offset - previous_offset
    previous_link = None
    if previous_limit > 0:
        previous_link = build_page_link(filters, previous_limit, previous_offset)

    return PageResult(
        count=total_count,
        next=next_link,
        previous=previous_link,
        results=[format_media(record) for record in page],
    )
