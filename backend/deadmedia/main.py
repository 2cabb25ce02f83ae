"""Dead Media API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DeadMediaError → bare status codes
    - One MediaStore and one PeerClient per app, reachable only through app.state
    - Seed data loaded on startup via lifespan context manager

Design Decisions:
    - create_app factory: tests build isolated apps with their own store/peer
    - store/peer attached at construction, not in lifespan: ASGI test transports
      do not run lifespan, yet handlers still find their dependencies
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from deadmedia import __version__
from deadmedia.api.error_handlers import register_error_handlers
from deadmedia.api.routes import media, transfer
from deadmedia.config import Settings, get_settings
from deadmedia.infrastructure.media_store import MediaStore, random_jitter
from deadmedia.infrastructure.observability import setup_logging
from deadmedia.infrastructure.peer_client import PeerClient
from deadmedia.infrastructure.seed import load_seed_file, seed_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    if settings.seed_file:
        entries = load_seed_file(settings.seed_file)
        await seed_store(app.state.store, entries)
    logger.info("Dead Media API started")
    yield
    await app.state.peer_client.aclose()
    logger.info("Dead Media API shutting down")


def create_app(
    settings: Settings | None = None,
    store: MediaStore | None = None,
    peer_client: PeerClient | None = None,
) -> FastAPI:
    """Wire settings, store, peer client, routes and error handlers."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Dead Media API", version=__version__, lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store or MediaStore(
        delay=random_jitter(
            settings.store_min_delay_ms, settings.store_max_delay_ms,
        ),
        error_mode=settings.store_error_mode,
    )
    app.state.peer_client = peer_client or PeerClient(
        timeout_seconds=settings.peer_timeout_seconds,
    )

    # Routes, registered explicitly
    app.include_router(media.router)
    app.include_router(transfer.router)

    register_error_handlers(app)
    return app


app = create_app()
