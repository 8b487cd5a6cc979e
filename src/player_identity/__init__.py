"""Player Identity - name <-> UUID resolution with layered fallbacks.

Resolves player names to UUIDs and back through:
- An in-process bidirectional cache (first writer wins, never evicts)
- The live-session directory (online and previously-seen players)
- A remote identity service, when running in authenticated mode
- Deterministic name hashing, when running offline

Example:
    >>> from player_identity import IdentityResolver, InMemorySessionDirectory
    >>>
    >>> sessions = InMemorySessionDirectory()
    >>> resolver = IdentityResolver(sessions, authenticated=False)
    >>>
    >>> uuid = await resolver.resolve_id("Alice")      # derived, then cached
    >>> await resolver.resolve_name(uuid)               # "Alice"
    >>> await resolver.resolve_name(uuid4())            # "unknown"
    >>>
    >>> mappings = resolver.snapshot()                  # hand to a MappingStore
"""

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
from player_identity.identity import (
    UNKNOWN_NAME,
    IdentityCache,
    IdentityResolver,
    IdResolution,
    NameResolution,
    ResolutionSource,
    ResolutionStatus,
    offline_uuid,
)
from player_identity.remote import (
    ChainedIdentityService,
    MojangIdentityService,
    RemoteConfig,
)
from player_identity.sessions import InMemorySessionDirectory

__version__ = "0.1.0"

__all__ = [
    # Resolver
    "IdentityCache",
    "IdentityResolver",
    "offline_uuid",
    "UNKNOWN_NAME",
    # Results
    "IdResolution",
    "NameResolution",
    "ResolutionSource",
    "ResolutionStatus",
    # Collaborators
    "ChainedIdentityService",
    "InMemorySessionDirectory",
    "MojangIdentityService",
    "RemoteConfig",
    # Types & protocols
    "IdentityService",
    "MappingStore",
    "PlayerProfile",
    "SessionDirectory",
    # Exceptions
    "IdentityError",
    "MalformedResponseError",
    "RemoteLookupError",
]
