"""In-memory bidirectional name <-> UUID cache."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from uuid import UUID

from player_identity.core.utils import normalize_name


class IdentityCache:
    """Bidirectional name/UUID mapping, unique on both sides.

    Names are keyed by their normalized form; the first spelling seen is
    kept for display. Inserts are first-writer-wins: a pair is stored only
    if neither side is already bound, and nothing is ever overwritten.
    All access goes through one lock so check-then-insert is atomic.
    """

    def __init__(self, case_sensitive: bool = False) -> None:
        self._case_sensitive = case_sensitive
        self._lock = threading.Lock()
        self._key_to_id: dict[str, UUID] = {}
        self._key_to_name: dict[str, str] = {}
        self._id_to_key: dict[UUID, str] = {}

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    def normalize(self, name: str) -> str:
        return normalize_name(name, self._case_sensitive)

    def add(self, name: str, uuid: UUID) -> bool:
        """Store a pair unless either side is already bound.

        Returns True only when a new pair was stored.
        """
        key = self.normalize(name)
        with self._lock:
            if key in self._key_to_id or uuid in self._id_to_key:
                return False
            self._key_to_id[key] = uuid
            self._key_to_name[key] = name
            self._id_to_key[uuid] = key
            return True

    def add_all(self, mappings: Mapping[str, UUID]) -> int:
        """Store many pairs. Returns how many were new."""
        return sum(1 for name, uuid in mappings.items() if self.add(name, uuid))

    def lookup_id(self, name: str) -> UUID | None:
        with self._lock:
            return self._key_to_id.get(self.normalize(name))

    def lookup_name(self, uuid: UUID) -> str | None:
        with self._lock:
            key = self._id_to_key.get(uuid)
            return self._key_to_name[key] if key is not None else None

    def contains_name(self, name: str) -> bool:
        with self._lock:
            return self.normalize(name) in self._key_to_id

    def contains_id(self, uuid: UUID) -> bool:
        with self._lock:
            return uuid in self._id_to_key

    def snapshot(self) -> dict[str, UUID]:
        """Copy of every mapping, display name -> UUID."""
        with self._lock:
            return {
                self._key_to_name[key]: uuid
                for key, uuid in self._key_to_id.items()
            }

    @property
    def size(self) -> int:
        """Number of name <-> UUID mappings."""
        with self._lock:
            return len(self._key_to_id)

    def __len__(self) -> int:
        return self.size
