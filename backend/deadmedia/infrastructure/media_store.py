"""In-Memory Media Store — async CRUD over a single shared collection.

Invariants:
    - Ids start at 0, strictly increase in allocation order, never reused
    - Every operation waits one delay (outside the lock), then touches the
      collection under an asyncio.Lock; no operation observes a half-applied mutation
    - Reads hand out copies; the collection is only changed through this class
    - error_mode=True makes every operation fail with StoreError

Design Decisions:
    - Delay strategy injected: tests pass no_delay, production gets 4–32 ms jitter
    - Store instance lives on app.state and reaches handlers through get_store
      (no module-level singleton)
"""

import asyncio
import logging
import random
from dataclasses import replace

from fastapi import Request

from deadmedia.core.domain_types import MediaId
from deadmedia.core.errors import MediaNotFoundError, StoreError
from deadmedia.core.media_record import MediaRecord
from deadmedia.core.store_protocols import DelayStrategy

logger = logging.getLogger(__name__)


def random_jitter(min_ms: int = 4, max_ms: int = 32) -> DelayStrategy:
    """Uniform integer delay in [min_ms, max_ms] milliseconds."""
    def delay() -> float:
        return random.randint(min_ms, max_ms) / 1000
    return delay


def no_delay() -> float:
    return 0.0


class MediaStore:
    """Owns every MediaRecord for the lifetime of the process."""

    def __init__(
        self,
        delay: DelayStrategy | None = None,
        error_mode: bool = False,
    ):
        self._delay = delay or random_jitter()
        self.error_mode = error_mode
        self._resources: list[MediaRecord] = []
        self._next_id = 0
        self._lock = asyncio.Lock()

    async def _settle(self, operation: str) -> None:
        if self.error_mode:
            logger.warning(
                f"Store in error mode, failing {operation}",
                extra={"operation": operation},
            )
            raise StoreError(operation)
        await asyncio.sleep(self._delay())

    def _index_of(self, media_id: int) -> int:
        for index, record in enumerate(self._resources):
            if record.id == media_id:
                return index
        raise MediaNotFoundError(media_id)

    def _log(self, operation: str, media_id: int | None = None) -> None:
        logger.debug(
            f"Store {operation} done",
            extra={
                "operation": operation,
                "media_id": media_id,
                "store_size": len(self._resources),
            },
        )

    async def create(self, name: str, type: str, desc: str) -> MediaId:
        await self._settle("create")
        async with self._lock:
            record = MediaRecord(MediaId(self._next_id), name, type, desc)
            self._resources.append(record)
            self._next_id += 1
            self._log("create", record.id)
        return record.id

    async def retrieve(self, media_id: int) -> MediaRecord:
        await self._settle("retrieve")
        async with self._lock:
            return replace(self._resources[self._index_of(media_id)])

    async def retrieve_all(self) -> list[MediaRecord]:
        await self._settle("retrieve_all")
        async with self._lock:
            return [replace(record) for record in self._resources]

    async def update(
        self, media_id: int, name: str, type: str, desc: str,
    ) -> MediaRecord:
        await self._settle("update")
        async with self._lock:
            record = self._resources[self._index_of(media_id)]
            record.name = name
            record.type = type
            record.desc = desc
            self._log("update", media_id)
            return replace(record)

    async def delete(self, media_id: int) -> MediaRecord:
        await self._settle("delete")
        async with self._lock:
            record = self._resources.pop(self._index_of(media_id))
            self._log("delete", media_id)
            return record


def get_store(request: Request) -> MediaStore:
    """FastAPI dependency for the application's store."""
    return request.app.state.store
