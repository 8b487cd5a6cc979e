"""Dependency injection: resolver and session directory from app state."""

from __future__ import annotations

from fastapi import HTTPException, Request

from player_identity.identity import IdentityResolver
from player_identity.sessions import InMemorySessionDirectory


def get_resolver(request: Request) -> IdentityResolver:
    """Get the IdentityResolver from app state."""
    resolver = getattr(request.app.state, "resolver", None)
    if resolver is None:
        raise HTTPException(status_code=503, detail="Identity resolver not initialized")
    return resolver


def get_sessions(request: Request) -> InMemorySessionDirectory:
    """Get the live-session directory from app state."""
    sessions = getattr(request.app.state, "sessions", None)
    if sessions is None:
        raise HTTPException(status_code=503, detail="Session directory not initialized")
    return sessions
