"""Peer Client — outbound HTTP to another catalog instance.

Invariants:
    - exists() never raises: any transport error or non-2xx answer means "absent"
    - create() returns the peer's JSON body or raises TransferFailedError
    - Every call is bounded by the configured timeout
    - Redirects are followed (a peer may answer /media/ with a 307 to /media)
    - No retries: a failed transfer is reported, not replayed

Design Decisions:
    - Wrapper over raw httpx client: isolates error mapping from the transfer service
    - Transport injectable: tests route calls into an in-process peer app
"""

import logging

import httpx
from fastapi import Request

from deadmedia.core.errors import TransferFailedError

logger = logging.getLogger(__name__)


class PeerClient:
    """Talks to peer catalog instances over HTTP."""

    def __init__(
        self,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.client = httpx.AsyncClient(
            timeout=timeout_seconds, transport=transport,
            follow_redirects=True,
        )

    async def exists(self, url: str) -> bool:
        """Lightweight existence probe (GET)."""
        try:
            response = await self.client.get(url)
        except httpx.HTTPError as e:
            logger.warning(
                f"Peer probe failed: {e!r}", extra={"target": url},
            )
            return False
        if not response.is_success:
            logger.warning(
                f"Peer probe answered {response.status_code}",
                extra={"target": url},
            )
        return response.is_success

    async def create(self, url: str, payload: dict) -> dict:
        """POST payload to the peer collection, return its representation."""
        try:
            response = await self.client.post(url, json=payload)
        except httpx.HTTPError as e:
            raise TransferFailedError(f"network error: {e!r}", url)
        if not response.is_success:
            raise TransferFailedError(
                f"peer answered {response.status_code}", url,
            )
        try:
            body = response.json()
        except ValueError:
            raise TransferFailedError("peer answered with invalid JSON", url)
        if not isinstance(body, dict):
            raise TransferFailedError("peer answered with a non-object", url)
        return body

    async def aclose(self) -> None:
        await self.client.aclose()


def get_peer_client(request: Request) -> PeerClient:
    """FastAPI dependency for the application's peer client."""
    return request.app.state.peer_client
