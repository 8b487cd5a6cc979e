"""Configuration for the remote identity service client."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RemoteConfig:
    """Configuration for a Mojang-compatible identity API.

    Defaults target the public Mojang endpoints.
    """

    profiles_url: str = "https://api.mojang.com/profiles/minecraft"
    session_url: str = "https://sessionserver.mojang.com/session/minecraft/profile"
    timeout: float = 10.0
    batch_size: int = 100  # max names per profiles request
    request_delay: float = 0.0  # seconds between batches, for rate limiting
