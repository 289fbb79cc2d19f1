"""Unit tests for auth/passwords.py -- argon2id hashing and verification.

Covers:
- hash() output is a self-describing argon2id PHC string
- verify() accepts the right password and rejects a different one
- two hashes of the same password differ (fresh salt) and both verify
- malformed stored hashes raise HashingError instead of returning False
- needs_rehash() detects hashes made with other cost parameters
"""

from __future__ import annotations

import pytest

from auth.passwords import Hasher
from core.errors import HashingError


class TestHashAndVerify:
    def test_hash_is_argon2id_phc_string(self, hasher: Hasher) -> None:
        hashed = hasher.hash("Valid1Password")
        assert hashed.startswith("$argon2id$"), f"Unexpected hash format: {hashed}"
        assert "m=1024,t=1,p=1" in hashed
        assert "Valid1Password" not in hashed

    def test_verify_round_trip(self, hasher: Hasher) -> None:
        hashed = hasher.hash("Valid1Password")
        assert hasher.verify("Valid1Password", hashed) is True

    @pytest.mark.parametrize("other", ["Valid2Password", "valid1password", "Valid1Password ", ""])
    def test_verify_rejects_different_password(self, hasher: Hasher, other: str) -> None:
        hashed = hasher.hash("Valid1Password")
        assert hasher.verify(other, hashed) is False

    def test_fresh_salt_per_call(self, hasher: Hasher) -> None:
        first = hasher.hash("Valid1Password")
        second = hasher.hash("Valid1Password")
        assert first != second
        assert hasher.verify("Valid1Password", first)
        assert hasher.verify("Valid1Password", second)

    def test_verify_uses_parameters_embedded_in_hash(self, hasher: Hasher) -> None:
        """A hash made with other costs still verifies -- parameters come from the string."""
        stronger = Hasher(time_cost=2, memory_cost=2048, parallelism=1)
        hashed = stronger.hash("Valid1Password")
        assert hasher.verify("Valid1Password", hashed) is True


class TestMalformedHash:
    @pytest.mark.parametrize("bad_hash", ["", "not-a-hash", "$2b$12$abcdefghijklmnopqrstuv"])
    def test_verify_raises_hashing_error(self, hasher: Hasher, bad_hash: str) -> None:
        with pytest.raises(HashingError):
            hasher.verify("Valid1Password", bad_hash)

    def test_needs_rehash_raises_on_malformed(self, hasher: Hasher) -> None:
        with pytest.raises(HashingError):
            hasher.needs_rehash("not-a-hash")


class TestNeedsRehash:
    def test_same_parameters_do_not_need_rehash(self, hasher: Hasher) -> None:
        assert hasher.needs_rehash(hasher.hash("Valid1Password")) is False

    def test_different_parameters_need_rehash(self, hasher: Hasher) -> None:
        old = Hasher(time_cost=2, memory_cost=1024, parallelism=1).hash("Valid1Password")
        assert hasher.needs_rehash(old) is True
