"""Offline-mode UUID derivation."""

from __future__ import annotations

import hashlib
from uuid import UUID

OFFLINE_PREFIX = "OfflinePlayer:"


def name_uuid_from_bytes(data: bytes) -> UUID:
    """Version 3 UUID over raw bytes, without a namespace.

    ``uuid.uuid3`` prepends a namespace, so the MD5 digest is built here and
    the version/variant bits are stamped by the UUID constructor.
    """
    return UUID(bytes=hashlib.md5(data).digest(), version=3)


def offline_uuid(name: str) -> UUID:
    """Deterministic UUID for a player name when no authority is available."""
    return name_uuid_from_bytes((OFFLINE_PREFIX + name).encode("utf-8"))
