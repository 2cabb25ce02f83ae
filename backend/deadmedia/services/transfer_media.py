"""Transfer Service — moves one record from this store to a peer catalog.

Invariants:
    - Terminal on first failure; each step maps to exactly one error type
    - Local deletion happens only after the peer confirmed creation
    - A failed remote creation leaves the local record untouched
    - No lock is held across the outbound peer calls

Design Decisions:
    - Peer response parsed and re-based BEFORE the local delete: a garbled
      answer aborts the transfer with the record still at home
    - create-then-delete is two independent store calls, not atomic as a pair
      (ADR: a crash in between duplicates the record on both sides, accepted)
"""

import logging

from deadmedia.core.errors import MediaNotFoundError, PeerUnavailableError
from deadmedia.core.store_protocols import MediaStoreLike, PeerClientLike
from deadmedia.core.transfer_urls import (
    rebase_identifier, resolve_transfer_urls, source_media_id,
)

logger = logging.getLogger(__name__)


class TransferService:
    """Orchestrates the existence checks, remote create and local delete."""

    def __init__(self, store: MediaStoreLike, peer: PeerClientLike):
        self.store = store
        self.peer = peer

    async def transfer(self, source: str, target: str, base_url: str) -> dict:
        source_url, target_url = resolve_transfer_urls(source, target, base_url)
        media_id = source_media_id(source_url)
        record = await self.store.retrieve(media_id)

        if not await self.peer.exists(target_url):
            raise PeerUnavailableError(target_url)

        remote = await self.peer.create(target_url, record.to_dict())
        rebased = rebase_identifier(remote, target_url)

        try:
            await self.store.delete(media_id)
        except MediaNotFoundError:
            logger.warning(
                f"Media {media_id} vanished locally during transfer",
                extra={"media_id": media_id, "target": target_url},
            )
        logger.info(
            f"Transferred media {media_id} to {rebased['id']}",
            extra={"media_id": media_id, "target": target_url},
        )
        return rebased
