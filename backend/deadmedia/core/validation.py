"""Entry Validation — pure predicates over candidate media records.

Invariants:
    - is_valid_entry never raises, whatever it is given
    - validate_seed_data rejects the whole dataset if any entry is invalid
"""

import logging
from typing import Any

from pydantic import ValidationError

from deadmedia.schemas.media import MediaEntry

logger = logging.getLogger(__name__)


def is_valid_entry(candidate: Any) -> bool:
    """True iff candidate has a valid name, type and desc."""
    try:
        MediaEntry.model_validate(candidate)
    except ValidationError:
        return False
    return True


def validate_seed_data(data: Any) -> bool:
    """True iff data is a list of valid entries."""
    if not isinstance(data, list):
        logger.error("Seed data should be a JSON array")
        return False
    for index, entry in enumerate(data):
        if not is_valid_entry(entry):
            logger.error(f"Invalid seed entry at index {index}: {entry!r}")
            return False
    return True
