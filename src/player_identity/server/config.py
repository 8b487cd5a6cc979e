"""Server configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from player_identity.remote.config import RemoteConfig


@dataclass
class ServerConfig:
    """Configuration for the player identity server."""

    # Network
    host: str = "127.0.0.1"
    port: int = 8430

    # Resolution mode: authenticated asks the remote service, else names are hashed
    authenticated: bool = True
    case_sensitive: bool = False

    # Remote identity service
    remote: RemoteConfig = field(default_factory=RemoteConfig)

    # CORS
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
