"""Representation Formatter — internal record to wire shape."""

from deadmedia.core.domain_types import MEDIA_PATH_PREFIX
from deadmedia.core.media_record import MediaRecord


def media_path(media_id: int) -> str:
    return f"{MEDIA_PATH_PREFIX}/{media_id}"


def format_media(record: MediaRecord) -> dict:
    """Replace the numeric id with the record's canonical path."""
    return {
        "id": media_path(record.id),
        "name": record.name,
        "type": record.type,
        "desc": record.desc,
    }
