"""Tests for the bidirectional identity cache and offline derivation."""

from __future__ import annotations

import hashlib
from concurrent.futures import ThreadPoolExecutor
from uuid import RFC_4122, UUID, uuid4

import pytest

from player_identity.identity.cache import IdentityCache
from player_identity.identity.derivation import name_uuid_from_bytes, offline_uuid


# =====================================================================
# 1. IdentityCache
# =====================================================================


class TestIdentityCache:
    @pytest.fixture
    def cache(self):
        return IdentityCache()

    def test_lookup_returns_none_for_unknown(self, cache):
        assert cache.lookup_id("nobody") is None
        assert cache.lookup_name(uuid4()) is None

    def test_add_and_lookup_both_directions(self, cache):
        uid = uuid4()
        assert cache.add("Steve", uid) is True
        assert cache.lookup_id("Steve") == uid
        assert cache.lookup_name(uid) == "Steve"

    def test_lookup_is_case_insensitive_by_default(self, cache):
        uid = uuid4()
        cache.add("Steve", uid)
        assert cache.lookup_id("steve") == uid
        assert cache.lookup_id("STEVE") == uid

    def test_first_spelling_is_kept_for_display(self, cache):
        uid = uuid4()
        cache.add("Steve", uid)
        cache.add("STEVE", uid)
        assert cache.lookup_name(uid) == "Steve"

    def test_case_sensitive_cache_keeps_spellings_apart(self):
        cache = IdentityCache(case_sensitive=True)
        a, b = uuid4(), uuid4()
        assert cache.add("Steve", a)
        assert cache.add("steve", b)
        assert cache.lookup_id("Steve") == a
        assert cache.lookup_id("steve") == b

    def test_add_same_pair_twice_is_idempotent(self, cache):
        uid = uuid4()
        assert cache.add("Alex", uid) is True
        assert cache.add("Alex", uid) is False
        assert cache.snapshot() == {"Alex": uid}

    def test_name_bound_to_other_uuid_is_not_rebound(self, cache):
        first, second = uuid4(), uuid4()
        cache.add("Alex", first)
        assert cache.add("Alex", second) is False
        assert cache.lookup_id("Alex") == first
        assert not cache.contains_id(second)

    def test_uuid_bound_to_other_name_is_not_rebound(self, cache):
        uid = uuid4()
        cache.add("Alex", uid)
        assert cache.add("Alexandra", uid) is False
        assert cache.lookup_name(uid) == "Alex"
        assert not cache.contains_name("Alexandra")

    def test_contains(self, cache):
        uid = uuid4()
        cache.add("Notch", uid)
        assert cache.contains_name("notch")
        assert cache.contains_id(uid)
        assert not cache.contains_name("jeb_")

    def test_snapshot_is_a_copy(self, cache):
        cache.add("Notch", uuid4())
        snap = cache.snapshot()
        snap["Intruder"] = uuid4()
        assert not cache.contains_name("Intruder")
        assert cache.size == 1

    def test_add_all_counts_new_pairs(self, cache):
        a, b = uuid4(), uuid4()
        cache.add("A", a)
        added = cache.add_all({"A": a, "B": b, "C": a})
        assert added == 1
        assert cache.size == 2
        assert len(cache) == 2

    def test_concurrent_adds_keep_one_binding_per_name(self, cache):
        candidates = [uuid4() for _ in range(64)]
        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(lambda u: cache.add("Bob", u), candidates))
        assert results.count(True) == 1
        winner = candidates[results.index(True)]
        assert cache.lookup_id("Bob") == winner
        assert cache.size == 1


# =====================================================================
# 2. Offline derivation
# =====================================================================


class TestOfflineUuid:
    def test_matches_md5_of_prefixed_name(self):
        digest = hashlib.md5(b"OfflinePlayer:Alice").digest()
        expected = UUID(bytes=digest, version=3)
        assert offline_uuid("Alice") == expected

    def test_is_version_3_rfc4122(self):
        uid = offline_uuid("Alice")
        assert uid.version == 3
        assert uid.variant == RFC_4122

    def test_is_deterministic(self):
        assert offline_uuid("Alice") == offline_uuid("Alice")

    def test_is_case_sensitive(self):
        assert offline_uuid("Alice") != offline_uuid("alice")

    def test_hashes_utf8_bytes(self):
        expected = name_uuid_from_bytes("OfflinePlayer:Zoë".encode("utf-8"))
        assert offline_uuid("Zoë") == expected

    def test_version_bits_stamped_over_digest(self):
        digest = hashlib.md5(b"OfflinePlayer:Alice").digest()
        uid = offline_uuid("Alice")
        assert uid.bytes[6] == (digest[6] & 0x0F) | 0x30
        assert uid.bytes[8] == (digest[8] & 0x3F) | 0x80
