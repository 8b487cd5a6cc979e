"""Core data types for player identity resolution."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class PlayerProfile:
    """Immutable name/UUID pair as reported by a collaborator."""

    uuid: UUID
    name: str

    def to_dict(self) -> dict[str, str]:
        return {"uuid": str(self.uuid), "name": self.name}
