"""Pytest fixtures for player-identity tests.

Provides fixtures for:
- A fake remote identity service with call counting and failure injection
- Live-session directories
- Resolvers in authenticated and offline mode
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from uuid import UUID

import pytest

from player_identity.core.exceptions import RemoteLookupError
from player_identity.identity import IdentityResolver
from player_identity.sessions import InMemorySessionDirectory


# ============================================================================
# Well-known identities
# ============================================================================

STEVE = ("Steve", UUID("069a79f4-44e9-4726-a5be-fca90e38aaf5"))
ALEX = ("Alex", UUID("ec561538-f3fd-461d-aff5-086b22154bce"))


# ============================================================================
# Fakes
# ============================================================================


class FakeIdentityService:
    """In-memory IdentityService that records every call.

    Set ``fail`` to make every lookup raise, and ``delay`` to hold each
    lookup open long enough for concurrent callers to pile up.
    """

    def __init__(self, profiles: Iterable[tuple[str, UUID]] = ()) -> None:
        self.profiles: dict[str, UUID] = dict(profiles)
        self.fail = False
        self.delay = 0.0
        self.name_calls: list[list[str]] = []
        self.id_calls: list[list[UUID]] = []

    @property
    def calls(self) -> int:
        return len(self.name_calls) + len(self.id_calls)

    async def lookup_ids_by_names(self, names: Iterable[str]) -> dict[str, UUID]:
        names = list(names)
        self.name_calls.append(names)
        await self._maybe_fail()
        wanted = {n.lower() for n in names}
        return {n: u for n, u in self.profiles.items() if n.lower() in wanted}

    async def lookup_names_by_ids(self, ids: Iterable[UUID]) -> dict[UUID, str]:
        ids = list(ids)
        self.id_calls.append(ids)
        await self._maybe_fail()
        by_id = {u: n for n, u in self.profiles.items()}
        return {u: by_id[u] for u in ids if u in by_id}

    async def _maybe_fail(self) -> None:
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail:
            raise RemoteLookupError("fake", "service down", status_code=503)


class BrokenSessionDirectory:
    """SessionDirectory whose every lookup raises."""

    def find_by_name(self, name):
        raise RuntimeError("directory offline")

    def find_by_id(self, uuid):
        raise RuntimeError("directory offline")

    def find_historical_by_id(self, uuid):
        raise RuntimeError("directory offline")


class RecordingStore:
    """MappingStore that keeps every export in memory."""

    def __init__(self) -> None:
        self.saved: list[dict[str, UUID]] = []

    def save_all(self, mappings):
        self.saved.append(dict(mappings))


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def remote() -> FakeIdentityService:
    """Remote service that knows Steve and Alex."""
    return FakeIdentityService([STEVE, ALEX])


@pytest.fixture
def sessions() -> InMemorySessionDirectory:
    return InMemorySessionDirectory()


@pytest.fixture
def broken_sessions() -> BrokenSessionDirectory:
    return BrokenSessionDirectory()


@pytest.fixture
def online_resolver(sessions: InMemorySessionDirectory, remote: FakeIdentityService) -> IdentityResolver:
    """Resolver in authenticated mode."""
    return IdentityResolver(sessions, remote, authenticated=True)


@pytest.fixture
def offline_resolver(sessions: InMemorySessionDirectory) -> IdentityResolver:
    """Resolver in unauthenticated mode."""
    return IdentityResolver(sessions, authenticated=False)


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()
