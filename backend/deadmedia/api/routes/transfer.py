"""Transfer Route — hands a local record over to a peer catalog.

Invariants:
    - 200 carries the peer's representation with a fully qualified id
    - 404 unknown source, 421 unreachable target, 500 anything else,
      including a body that is not {"source": str, "target": str}
    - Source URLs are resolved against this service's own base URL

Design Decisions:
    - Body read by read_transfer_request instead of a Pydantic body parameter:
      FastAPI's own validation would answer 400, outside this route's status set
"""

import logging

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from deadmedia.core.errors import InvalidTransferError
from deadmedia.infrastructure.media_store import MediaStore, get_store
from deadmedia.infrastructure.peer_client import PeerClient, get_peer_client
from deadmedia.schemas.media import TransferRequest
from deadmedia.services.transfer_media import TransferService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/transfer", tags=["transfer"])


async def read_transfer_request(request: Request) -> TransferRequest:
    """Parse the JSON body, mapping any shape error to InvalidTransferError."""
    try:
        payload = await request.json()
    except ValueError as e:
        raise InvalidTransferError(f"Transfer body is not JSON: {e}")
    try:
        return TransferRequest.model_validate(payload)
    except ValidationError as e:
        raise InvalidTransferError(
            f"Transfer body needs string source and target: {e.errors()}",
        )


def get_transfer_service(
    store: MediaStore = Depends(get_store),
    peer: PeerClient = Depends(get_peer_client),
) -> TransferService:
    return TransferService(store, peer)


@router.post("")
async def transfer_media(
    request: Request,
    body: TransferRequest = Depends(read_transfer_request),
    service: TransferService = Depends(get_transfer_service),
):
    """Move the record at body.source to the collection at body.target."""
    logger.info(
        f"Transfer requested: {body.source} -> {body.target}",
        extra={"target": body.target},
    )
    return await service.transfer(
        body.source, body.target, str(request.base_url),
    )
