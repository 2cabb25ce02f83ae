"""Root conftest — shared test configuration and store fixtures."""

import os
from pathlib import Path

import pytest

# Human-readable logs in test output; never pick up a developer's seed file
os.environ.setdefault("DEADMEDIA_LOG_FORMAT", "text")
os.environ.pop("DEADMEDIA_SEED_FILE", None)

from deadmedia.infrastructure.media_store import MediaStore, no_delay  # noqa: E402
from deadmedia.infrastructure.seed import load_seed_file, seed_store  # noqa: E402

SEED_FILE = Path(__file__).resolve().parents[1] / "data" / "deadmedia.json"


@pytest.fixture
def seed_entries():
    """The 20-item example dataset shipped with the service."""
    return load_seed_file(SEED_FILE)


@pytest.fixture
def store():
    """Empty store with no artificial latency."""
    return MediaStore(delay=no_delay)


@pytest.fixture
async def seeded_store(store, seed_entries):
    await seed_store(store, seed_entries)
    return store


@pytest.fixture
def seed_file_path():
    return SEED_FILE
