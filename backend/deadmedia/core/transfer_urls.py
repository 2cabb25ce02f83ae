"""Transfer URL Handling — pure parsing and re-basing for the transfer protocol.

Invariants:
    - source may be relative; it is resolved against this service's base URL
    - target must be an absolute http(s) URL
    - The source id is the last path segment; anything non-integer is "not found"
    - The remote id is re-based onto target, never onto this service
"""

import re
from urllib.parse import urljoin, urlsplit

from deadmedia.core.domain_types import MediaId
from deadmedia.core.errors import (
    InvalidTransferError, MediaNotFoundError, TransferFailedError,
)

_ALLOWED_SCHEMES = ("http", "https")
_MEDIA_ID = re.compile(r"\d+")


def _require_absolute(url: str, role: str) -> str:
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise InvalidTransferError(f"Malformed {role} URL {url!r}: {e}")
    if parts.scheme not in _ALLOWED_SCHEMES or not parts.netloc:
        raise InvalidTransferError(f"Malformed {role} URL {url!r}")
    return url


def resolve_transfer_urls(
    source: str, target: str, base_url: str,
) -> tuple[str, str]:
    """Return (absolute source URL, absolute target URL)."""
    try:
        resolved_source = urljoin(base_url, source)
    except ValueError as e:
        raise InvalidTransferError(f"Malformed source URL {source!r}: {e}")
    return (
        _require_absolute(resolved_source, "source"),
        _require_absolute(target, "target"),
    )


def source_media_id(source_url: str) -> MediaId:
    segment = urlsplit(source_url).path.rsplit("/", 1)[-1]
    if not _MEDIA_ID.fullmatch(segment):
        raise MediaNotFoundError(segment)
    return MediaId(int(segment))


def rebase_identifier(remote_record: dict, target_url: str) -> dict:
    """Rewrite the peer-assigned id into a fully qualified URL under target."""
    remote_id = remote_record.get("id")
    if not isinstance(remote_id, str) or not remote_id:
        raise TransferFailedError(
            f"response carries no usable id ({remote_id!r})", target_url,
        )
    return {**remote_record, "id": urljoin(target_url, remote_id)}
