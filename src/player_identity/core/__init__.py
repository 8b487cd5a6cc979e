"""Core types and protocols for player identity resolution."""

from player_identity.core.types import PlayerProfile
from player_identity.core.protocols import (
    IdentityService,
    MappingStore,
    SessionDirectory,
)
from player_identity.core.exceptions import (
    IdentityError,
    MalformedResponseError,
    RemoteLookupError,
)

__all__ = [
    # Types
    "PlayerProfile",
    # Protocols
    "IdentityService",
    "MappingStore",
    "SessionDirectory",
    # Exceptions
    "IdentityError",
    "MalformedResponseError",
    "RemoteLookupError",
]
