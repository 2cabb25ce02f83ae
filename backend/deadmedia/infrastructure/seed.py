"""Seed Data — boot-time loading of an example dataset into the store.

Invariants:
    - The whole file is rejected if any entry is invalid (nothing is loaded)
    - Entries are created in file order, so seeded ids are 0..n-1
"""

import json
import logging
from pathlib import Path

from deadmedia.core.store_protocols import MediaStoreLike
from deadmedia.core.validation import validate_seed_data

logger = logging.getLogger(__name__)


class SeedDataError(Exception):
    """Seed file missing, unparsable or invalid."""


def load_seed_file(path: str | Path) -> list[dict]:
    """Read and validate a JSON array of {name, type, desc} entries."""
    path = Path(path)
    if not path.is_file():
        raise SeedDataError(f"The file {path} does not exist")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise SeedDataError(f"Failed to parse {path}, make sure it is valid JSON: {e}")
    if not validate_seed_data(data):
        raise SeedDataError(f"{path} does not satisfy validation constraints")
    return data


async def seed_store(store: MediaStoreLike, entries: list[dict]) -> int:
    """Create every entry in order. Returns the number of records created."""
    for entry in entries:
        await store.create(entry["name"], entry["type"], entry["desc"])
    logger.info(f"Seeded store with {len(entries)} media records")
    return len(entries)
