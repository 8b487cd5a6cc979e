"""Primary/fallback identity service composition."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from player_identity.core.protocols import IdentityService

logger = logging.getLogger(__name__)


class ChainedIdentityService:
    """Ask a preferred service first and fall back to another on failure.

    Typically a self-hosted mirror in front of the public API. Only the
    fallback's failure reaches the caller.
    """

    def __init__(self, primary: "IdentityService", fallback: "IdentityService") -> None:
        self._primary = primary
        self._fallback = fallback

    async def lookup_ids_by_names(self, names: Iterable[str]) -> dict[str, UUID]:
        names = list(names)
        try:
            return await self._primary.lookup_ids_by_names(names)
        except Exception:
            logger.debug("Primary identity service failed for names, falling back", exc_info=True)
        return await self._fallback.lookup_ids_by_names(names)

    async def lookup_names_by_ids(self, ids: Iterable[UUID]) -> dict[UUID, str]:
        ids = list(ids)
        try:
            return await self._primary.lookup_names_by_ids(ids)
        except Exception:
            logger.debug("Primary identity service failed for ids, falling back", exc_info=True)
        return await self._fallback.lookup_names_by_ids(ids)
