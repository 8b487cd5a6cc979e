"""IdentityResolver: orchestrates cache → session → remote/derive lookups."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Hashable, Mapping
from typing import TYPE_CHECKING, TypeVar
from uuid import UUID

from player_identity.core.utils import parse_uuid
from player_identity.identity.cache import IdentityCache
from player_identity.identity.derivation import offline_uuid
from player_identity.identity.types import (
    IdResolution,
    NameResolution,
    ResolutionSource,
    ResolutionStatus,
)

if TYPE_CHECKING:
    from player_identity.core.protocols import (
        IdentityService,
        MappingStore,
        SessionDirectory,
    )
    from player_identity.core.types import PlayerProfile

logger = logging.getLogger(__name__)

_R = TypeVar("_R")

MALFORMED = "malformed response"


class IdentityResolver:
    """Translates player names and UUIDs in both directions.

    Name → UUID:  cache, online session, then remote service (authenticated)
                  or offline derivation (unauthenticated).
    UUID → name:  cache, online session, session history, then remote
                  service (authenticated) or the "unknown" sentinel.

    Every successful answer is added to the cache, which only grows.
    No lookup raises: collaborator failures are logged and come back as
    typed results.
    """

    def __init__(
        self,
        sessions: "SessionDirectory",
        remote: "IdentityService | None" = None,
        *,
        authenticated: bool,
        case_sensitive: bool = False,
        cache: IdentityCache | None = None,
    ) -> None:
        if authenticated and remote is None:
            raise ValueError("authenticated mode requires a remote identity service")
        self.cache = cache if cache is not None else IdentityCache(case_sensitive=case_sensitive)
        self._sessions = sessions
        self._remote = remote
        self._authenticated = authenticated
        self._pending_ids: dict[tuple[asyncio.AbstractEventLoop, str], asyncio.Task[IdResolution]] = {}
        self._pending_names: dict[tuple[asyncio.AbstractEventLoop, UUID], asyncio.Task[NameResolution]] = {}

    @property
    def authenticated(self) -> bool:
        return self._authenticated

    # ── Cache ─────────────────────────────────────────────────

    def add(self, name: str, uuid: UUID) -> bool:
        """Cache a pair unless either side is already bound elsewhere."""
        return self.cache.add(name, uuid)

    def add_all(self, mappings: Mapping[str, UUID]) -> int:
        """Seed the cache, e.g. from a persisted store at startup."""
        added = self.cache.add_all(mappings)
        logger.info("Seeded identity cache with %d of %d mappings", added, len(mappings))
        return added

    def snapshot(self) -> dict[str, UUID]:
        """Every known mapping, for bulk persistence."""
        return self.cache.snapshot()

    def export_to(self, store: "MappingStore") -> int:
        """Hand the current snapshot to a persistence collaborator."""
        mappings = self.snapshot()
        store.save_all(mappings)
        logger.info("Exported %d identity mappings", len(mappings))
        return len(mappings)

    # ── Name → UUID ───────────────────────────────────────────

    async def resolve_id(self, name: str) -> UUID | None:
        """UUID for a player name, or None if it can't be determined."""
        return (await self.lookup_id(name)).uuid

    async def lookup_id(self, name: str) -> IdResolution:
        """Resolve a name to a UUID, reporting which tier answered."""
        cached = self.cache.lookup_id(name)
        if cached is not None:
            return IdResolution(name, cached, ResolutionStatus.RESOLVED, ResolutionSource.CACHE)

        profile = self._ask_sessions("find_by_name", name)
        if profile is not None and self.cache.normalize(profile.name) != self.cache.normalize(name):
            # Directory matched under a looser naming convention than ours.
            logger.debug("Ignoring session match %r for name %r", profile.name, name)
            profile = None
        if profile is not None:
            return IdResolution(
                name,
                self._store(profile.name, profile.uuid),
                ResolutionStatus.RESOLVED,
                ResolutionSource.SESSION,
            )

        if not self._authenticated:
            return IdResolution(
                name,
                self._store(name, offline_uuid(name)),
                ResolutionStatus.RESOLVED,
                ResolutionSource.DERIVED,
            )

        return await self._coalesce(
            self._pending_ids, self.cache.normalize(name), lambda: self._fetch_id(name)
        )

    async def _fetch_id(self, name: str) -> IdResolution:
        logger.debug("Cache miss for name %r, asking remote service", name)
        try:
            found = await self._remote.lookup_ids_by_names({name})
        except Exception as exc:
            logger.warning("Remote UUID lookup failed for %r", name, exc_info=True)
            return IdResolution(
                name, None, ResolutionStatus.FAILED, ResolutionSource.REMOTE, error=str(exc)
            )

        if not _is_id_mapping(found):
            logger.warning("Remote UUID lookup for %r returned a malformed response: %r", name, found)
            return IdResolution(
                name, None, ResolutionStatus.FAILED, ResolutionSource.REMOTE, error=MALFORMED
            )

        # The service answers with its own spelling of the name.
        key = self.cache.normalize(name)
        for returned_name, uuid in found.items():
            if self.cache.normalize(returned_name) == key:
                return IdResolution(
                    name,
                    self._store(returned_name, uuid),
                    ResolutionStatus.RESOLVED,
                    ResolutionSource.REMOTE,
                )
        return IdResolution(name, None, ResolutionStatus.NOT_FOUND, ResolutionSource.REMOTE)

    # ── UUID → name ───────────────────────────────────────────

    async def resolve_name(self, uuid: UUID | str) -> str | None:
        """Player name for a UUID.

        Returns "unknown" in unauthenticated mode when nothing local knows
        the UUID, and None when it can't be determined otherwise.
        """
        return (await self.lookup_name(uuid)).display_name

    async def lookup_name(self, uuid: UUID | str) -> NameResolution:
        """Resolve a UUID to a name, reporting which tier answered."""
        parsed = parse_uuid(uuid)
        if parsed is None:
            return NameResolution(None, None, ResolutionStatus.NOT_FOUND, error="invalid UUID")

        cached = self.cache.lookup_name(parsed)
        if cached is not None:
            return NameResolution(parsed, cached, ResolutionStatus.RESOLVED, ResolutionSource.CACHE)

        for method, source in (
            ("find_by_id", ResolutionSource.SESSION),
            ("find_historical_by_id", ResolutionSource.HISTORY),
        ):
            profile = self._ask_sessions(method, parsed)
            if profile is not None:
                self.add(profile.name, parsed)
                return NameResolution(parsed, profile.name, ResolutionStatus.RESOLVED, source)

        if not self._authenticated:
            return NameResolution(parsed, None, ResolutionStatus.NO_AUTHORITY)

        return await self._coalesce(self._pending_names, parsed, lambda: self._fetch_name(parsed))

    async def _fetch_name(self, uuid: UUID) -> NameResolution:
        logger.debug("Cache miss for UUID %s, asking remote service", uuid)
        try:
            found = await self._remote.lookup_names_by_ids({uuid})
        except Exception as exc:
            logger.warning("Remote name lookup failed for %s", uuid, exc_info=True)
            return NameResolution(
                uuid, None, ResolutionStatus.FAILED, ResolutionSource.REMOTE, error=str(exc)
            )

        if not _is_name_mapping(found):
            logger.warning("Remote name lookup for %s returned a malformed response: %r", uuid, found)
            return NameResolution(
                uuid, None, ResolutionStatus.FAILED, ResolutionSource.REMOTE, error=MALFORMED
            )

        name = found.get(uuid)
        if not name:
            return NameResolution(uuid, None, ResolutionStatus.NOT_FOUND, ResolutionSource.REMOTE)
        self.add(name, uuid)
        return NameResolution(uuid, name, ResolutionStatus.RESOLVED, ResolutionSource.REMOTE)

    # ── Helpers ───────────────────────────────────────────────

    def _store(self, name: str, uuid: UUID) -> UUID:
        """Add a pair and return the UUID the cache now holds for the name.

        A concurrent writer may have bound the name first; callers must see
        that binding rather than their own candidate.
        """
        self.add(name, uuid)
        return self.cache.lookup_id(name) or uuid

    def _ask_sessions(self, method: str, key: str | UUID) -> "PlayerProfile | None":
        try:
            return getattr(self._sessions, method)(key)
        except Exception:
            logger.exception("Session directory %s(%r) failed", method, key)
            return None

    @staticmethod
    async def _coalesce(
        pending: dict,
        key: Hashable,
        start: Callable[[], Awaitable[_R]],
    ) -> _R:
        """Share one in-flight remote lookup among concurrent callers."""
        # Tasks are bound to their loop; callers on other loops start their own.
        slot = (asyncio.get_running_loop(), key)
        task = pending.get(slot)
        if task is None:
            task = asyncio.ensure_future(start())
            pending[slot] = task

            def _forget(done: asyncio.Task) -> None:
                if pending.get(slot) is done:
                    del pending[slot]

            task.add_done_callback(_forget)
        # A cancelled caller must not cancel the lookup others are waiting on.
        return await asyncio.shield(task)


def _is_id_mapping(found: object) -> bool:
    """A name -> UUID answer with non-empty string keys and UUID values."""
    return isinstance(found, Mapping) and all(
        isinstance(name, str) and name and isinstance(uuid, UUID)
        for name, uuid in found.items()
    )


def _is_name_mapping(found: object) -> bool:
    """A UUID -> name answer with UUID keys and non-empty string values."""
    return isinstance(found, Mapping) and all(
        isinstance(uuid, UUID) and isinstance(name, str) and name
        for uuid, name in found.items()
    )
