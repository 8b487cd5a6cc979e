"""Live-session tracking."""

from player_identity.sessions.directory import InMemorySessionDirectory

__all__ = ["InMemorySessionDirectory"]
