"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations wait
      (latency jitter, network), while pagination/validation/formatting stay sync
"""

from typing import Protocol

from deadmedia.core.domain_types import MediaId
from deadmedia.core.media_record import MediaRecord


class DelayStrategy(Protocol):
    """Returns the number of seconds a store operation waits before completing."""
    def __call__(self) -> float: ...


class MediaStoreLike(Protocol):
    """Contract for the media collection — implemented by shell."""
    async def create(self, name: str, type: str, desc: str) -> MediaId: ...
    async def retrieve(self, media_id: int) -> MediaRecord: ...
    async def retrieve_all(self) -> list[MediaRecord]: ...
    async def update(
        self, media_id: int, name: str, type: str, desc: str,
    ) -> MediaRecord: ...
    async def delete(self, media_id: int) -> MediaRecord: ...


class PeerClientLike(Protocol):
    """Contract for outbound calls to another catalog instance."""
    async def exists(self, url: str) -> bool: ...
    async def create(self, url: str, payload: dict) -> dict: ...
