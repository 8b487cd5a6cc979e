"""In-memory directory of connected and previously-seen players."""

from __future__ import annotations

import logging
import threading
from uuid import UUID

from player_identity.core.types import PlayerProfile
from player_identity.core.utils import normalize_name

logger = logging.getLogger(__name__)


class InMemorySessionDirectory:
    """Tracks who is online now and everyone seen since startup.

    Implements the SessionDirectory protocol. Name lookups only consider
    online players and ignore case unless ``case_sensitive`` is set; UUID lookups come in an online and a
    historical flavor. A player keeps the last name they connected with.
    """

    def __init__(self, case_sensitive: bool = False) -> None:
        self._case_sensitive = case_sensitive
        self._lock = threading.Lock()
        self._online: dict[UUID, PlayerProfile] = {}
        self._seen: dict[UUID, PlayerProfile] = {}

    def connect(self, name: str, uuid: UUID) -> PlayerProfile:
        """Record a player joining."""
        profile = PlayerProfile(uuid=uuid, name=name)
        with self._lock:
            self._online[uuid] = profile
            self._seen[uuid] = profile
        logger.debug("Player %s (%s) connected", name, uuid)
        return profile

    def disconnect(self, uuid: UUID) -> bool:
        """Record a player leaving. Returns False if they weren't online."""
        with self._lock:
            profile = self._online.pop(uuid, None)
        if profile is None:
            return False
        logger.debug("Player %s (%s) disconnected", profile.name, uuid)
        return True

    def find_by_name(self, name: str) -> PlayerProfile | None:
        wanted = normalize_name(name, self._case_sensitive)
        with self._lock:
            for profile in self._online.values():
                if normalize_name(profile.name, self._case_sensitive) == wanted:
                    return profile
        return None

    def find_by_id(self, uuid: UUID) -> PlayerProfile | None:
        with self._lock:
            return self._online.get(uuid)

    def find_historical_by_id(self, uuid: UUID) -> PlayerProfile | None:
        with self._lock:
            return self._seen.get(uuid)

    def online(self) -> list[PlayerProfile]:
        """Currently connected players."""
        with self._lock:
            return list(self._online.values())

    @property
    def seen_count(self) -> int:
        with self._lock:
            return len(self._seen)
