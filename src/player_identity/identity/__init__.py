"""Identity resolution package: bidirectional name <-> UUID cache and fallback chain."""

from player_identity.identity.cache import IdentityCache
from player_identity.identity.derivation import offline_uuid
from player_identity.identity.resolver import IdentityResolver
from player_identity.identity.types import (
    UNKNOWN_NAME,
    IdResolution,
    NameResolution,
    ResolutionSource,
    ResolutionStatus,
)

__all__ = [
    "UNKNOWN_NAME",
    "IdResolution",
    "IdentityCache",
    "IdentityResolver",
    "NameResolution",
    "ResolutionSource",
    "ResolutionStatus",
    "offline_uuid",
]
