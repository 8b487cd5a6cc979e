"""Remote identity service clients."""

from player_identity.remote.chain import ChainedIdentityService
from player_identity.remote.config import RemoteConfig
from player_identity.remote.mojang import MojangIdentityService

__all__ = ["ChainedIdentityService", "MojangIdentityService", "RemoteConfig"]
