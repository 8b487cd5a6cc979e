"""Protocols (interfaces) for the resolver's collaborators."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable
from uuid import UUID

if TYPE_CHECKING:
    from player_identity.core.types import PlayerProfile


@runtime_checkable
class SessionDirectory(Protocol):
    """Tracks connected and previously-seen players."""

    def find_by_name(self, name: str) -> PlayerProfile | None:
        """Find an online player by name."""
        ...

    def find_by_id(self, uuid: UUID) -> PlayerProfile | None:
        """Find an online player by UUID."""
        ...

    def find_historical_by_id(self, uuid: UUID) -> PlayerProfile | None:
        """Find a player that has ever been seen, online or not."""
        ...


@runtime_checkable
class IdentityService(Protocol):
    """Remote authority issuing player UUIDs.

    Both lookups either answer as a whole or raise. Names or ids the
    service does not know are simply absent from the returned mapping.
    """

    async def lookup_ids_by_names(self, names: Iterable[str]) -> dict[str, UUID]:
        """Map player names to UUIDs."""
        ...

    async def lookup_names_by_ids(self, ids: Iterable[UUID]) -> dict[UUID, str]:
        """Map UUIDs to current player names."""
        ...


@runtime_checkable
class MappingStore(Protocol):
    """Durable sink for exported name/UUID mappings."""

    def save_all(self, mappings: Mapping[str, UUID]) -> None:
        """Persist every mapping in one write."""
        ...
