"""Media Routes — CRUD and paginated listing for the dead media catalog.

Invariants:
    - Request bodies are validated by Pydantic before the store is touched
    - Ids that are not integers are treated as unknown (404), like deleted ids
    - An empty page answers 204 with no body
    - Store errors propagate to the global handlers (no try/except here)

Design Decisions:
    - limit/offset taken as raw strings: malformed values are a 500 per the
      catalog's error taxonomy, not a 400 from FastAPI's own coercion
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from deadmedia.core.errors import MediaNotFoundError
from deadmedia.core.formatter import format_media
from deadmedia.core.pagination import MediaFilters, paginate, parse_page_params
from deadmedia.infrastructure.media_store import MediaStore, get_store
from deadmedia.schemas.media import MediaEntry, MediaPage, MediaResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/media", tags=["media"])


def parse_media_id(raw_id: str) -> int:
    """Path id → int, or 404 for anything that cannot name a record."""
    if not raw_id.isdecimal():
        raise MediaNotFoundError(raw_id)
    return int(raw_id)


@router.get(
    "", response_model=MediaPage,
    responses={204: {"description": "Filtered page is empty"}},
)
async def list_media(
    name: str | None = Query(None),
    media_type: str | None = Query(None, alias="type"),
    desc: str | None = Query(None),
    limit: str | None = Query(None),
    offset: str | None = Query(None),
    store: MediaStore = Depends(get_store),
):
    """List media with equality filters and limit/offset pagination."""
    records = await store.retrieve_all()
    page_limit, page_offset = parse_page_params(limit, offset, len(records))
    filters = MediaFilters(name=name, type=media_type, desc=desc)
    page = paginate(records, filters, page_limit, page_offset)

    if not page.results:
        logger.info("Media page is empty, answering 204")
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    logger.info(
        f"Listed {len(page.results)} of {page.count} media "
        f"(limit={page_limit}, offset={page_offset})",
    )
    return page.to_dict()


@router.get("/{media_id}", response_model=MediaResponse)
async def get_media(media_id: str, store: MediaStore = Depends(get_store)):
    """Get one media record."""
    record = await store.retrieve(parse_media_id(media_id))
    return format_media(record)


@router.post(
    "", response_model=MediaResponse, status_code=status.HTTP_201_CREATED,
)
async def create_media(
    body: MediaEntry, store: MediaStore = Depends(get_store),
):
    """Create a media record."""
    new_id = await store.create(body.name, body.type.value, body.desc)
    record = await store.retrieve(new_id)
    logger.info(f"Created media {new_id}", extra={"media_id": new_id})
    return format_media(record)


@router.put("/{media_id}", response_model=MediaResponse)
async def update_media(
    media_id: str, body: MediaEntry, store: MediaStore = Depends(get_store),
):
    """Replace name, type and desc of an existing record."""
    record = await store.update(
        parse_media_id(media_id), body.name, body.type.value, body.desc,
    )
    logger.info(f"Updated media {record.id}", extra={"media_id": record.id})
    return format_media(record)


@router.delete("/{media_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_media(media_id: str, store: MediaStore = Depends(get_store)):
    """Delete a media record."""
    record = await store.delete(parse_media_id(media_id))
    logger.info(f"Deleted media {record.id}", extra={"media_id": record.id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
