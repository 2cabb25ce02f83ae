"""Media Record — the single entity owned by the store.

Invariants:
    - id is assigned by the store at creation and never mutated afterwards
    - name/type/desc are the only mutable fields (changed via store.update)
"""

from dataclasses import dataclass, asdict

from deadmedia.core.domain_types import MediaId


@dataclass
class MediaRecord:
    id: MediaId
    name: str
    type: str
    desc: str

    def to_dict(self) -> dict:
        return asdict(self)
