"""Route test fixtures — in-process catalog apps wired to each other.

Invariants:
    - Every test gets a fresh store seeded with the 20-item dataset
    - The peer is a second catalog app reached through httpx.ASGITransport
    - Unreachable peers are simulated with httpx.MockTransport raising ConnectError

Design Decisions:
    - raise_app_exceptions=False: the catch-all 500 handler is exercised the way
      a real server would answer, instead of re-raising into the test
"""

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from deadmedia.infrastructure.media_store import MediaStore, no_delay
from deadmedia.infrastructure.peer_client import PeerClient
from deadmedia.main import create_app

PEER_COLLECTION = "http://peer/media"


@pytest.fixture
def peer_store():
    return MediaStore(delay=no_delay)


@pytest.fixture
def peer_app(peer_store):
    return create_app(store=peer_store)


@pytest.fixture
async def peer_client(peer_app):
    """PeerClient whose requests land in peer_app, whatever the host."""
    client = PeerClient(transport=ASGITransport(app=peer_app))
    yield client
    await client.aclose()


@pytest.fixture
async def unreachable_peer_client():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = PeerClient(transport=httpx.MockTransport(refuse))
    yield client
    await client.aclose()


def _client_for(app):
    return AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    )


@pytest.fixture
async def client(seeded_store, peer_client):
    """Catalog under test, seeded, with a reachable peer."""
    app = create_app(store=seeded_store, peer_client=peer_client)
    async with _client_for(app) as c:
        yield c


@pytest.fixture
async def isolated_client(seeded_store, unreachable_peer_client):
    """Catalog under test whose peer never answers."""
    app = create_app(store=seeded_store, peer_client=unreachable_peer_client)
    async with _client_for(app) as c:
        yield c
