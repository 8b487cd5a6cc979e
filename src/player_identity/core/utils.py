"""Core utility functions for player identity resolution."""

from __future__ import annotations

from uuid import UUID


def normalize_name(name: str, case_sensitive: bool = False) -> str:
    """Return the cache key for a player name.

    Names compare case-insensitively unless the deployment says otherwise.
    """
    return name if case_sensitive else name.lower()


def parse_uuid(value: UUID | str) -> UUID | None:
    """Parse a UUID in canonical or undashed hex form.

    Returns None for anything that is not a 128-bit hex identifier.
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(hex=value.strip())
    except (AttributeError, ValueError):
        return None


def undashed(uuid: UUID) -> str:
    """32-character hex form used by the session server URLs."""
    return uuid.hex
