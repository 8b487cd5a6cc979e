"""Result types for identity resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

# Returned by name lookups in offline mode, where nothing can reverse a derived UUID.
UNKNOWN_NAME = "unknown"


class ResolutionStatus(Enum):
    """Outcome of a single resolution."""

    RESOLVED = "resolved"
    NOT_FOUND = "not_found"  # Authority answered, but doesn't know this key
    FAILED = "failed"  # Remote lookup errored; logged and swallowed
    NO_AUTHORITY = "no_authority"  # Offline mode, cannot reverse-resolve


class ResolutionSource(Enum):
    """Which tier of the fallback chain produced the answer."""

    CACHE = "cache"
    SESSION = "session"
    HISTORY = "history"
    REMOTE = "remote"
    DERIVED = "derived"
    NONE = "none"


@dataclass(frozen=True)
class IdResolution:
    """Result of resolving a player name to a UUID."""

    name: str
    uuid: UUID | None
    status: ResolutionStatus
    source: ResolutionSource = ResolutionSource.NONE
    error: str | None = None

    @property
    def found(self) -> bool:
        return self.status is ResolutionStatus.RESOLVED


@dataclass(frozen=True)
class NameResolution:
    """Result of resolving a UUID to a player name."""

    uuid: UUID | None
    name: str | None
    status: ResolutionStatus
    source: ResolutionSource = ResolutionSource.NONE
    error: str | None = None

    @property
    def found(self) -> bool:
        return self.status is ResolutionStatus.RESOLVED

    @property
    def display_name(self) -> str | None:
        """Name to show callers: the sentinel in offline mode, else the name."""
        if self.status is ResolutionStatus.NO_AUTHORITY:
            return UNKNOWN_NAME
        return self.name
