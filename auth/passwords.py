"""
auth/passwords.py -- One-way password hashing with argon2id.

argon2id is memory-hard: each guess costs memory_cost KiB of RAM as well as
CPU, which blunts GPU/ASIC brute force far better than a CPU-only KDF. The
three cost parameters come from Settings so operators can trade request
latency against attack cost without a code change.

Hashes are PHC strings ($argon2id$v=19$m=...,t=...,p=...$salt$digest). They
carry their own parameters and salt, so verify() works against hashes made
with older settings, and needs_rehash() tells login when to upgrade them.

Digest comparison happens inside libargon2 in constant time.

Layer rule: no imports from api/.
"""

from __future__ import annotations

import logging

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError
from argon2.exceptions import HashingError as Argon2HashingError

from core.errors import HashingError

logger = logging.getLogger("authservice.auth")


class Hasher:
    """Salted argon2id hashing and verification with configurable cost."""

    def __init__(self, time_cost: int = 3, memory_cost: int = 65536, parallelism: int = 4) -> None:
        self._ph = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
        )

    def hash(self, password: str) -> str:
        """Return a PHC-format argon2id hash with a fresh random salt."""
        try:
            return self._ph.hash(password)
        except Argon2HashingError as exc:
            raise HashingError("Failed to hash password") from exc

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if password matches password_hash.

        A wrong password returns False. A hash string that cannot be parsed
        raises HashingError -- that is a data problem, not a bad login.
        """
        try:
            return self._ph.verify(password_hash, password)
        except VerifyMismatchError:
            return False
        except InvalidHashError as exc:
            raise HashingError("Stored password hash is malformed") from exc
        except VerificationError:
            logger.warning("argon2 verification failed for a well-formed hash")
            return False

    def needs_rehash(self, password_hash: str) -> bool:
        """Return True if password_hash was made with different cost parameters."""
        try:
            return self._ph.check_needs_rehash(password_hash)
        except InvalidHashError as exc:
            raise HashingError("Stored password hash is malformed") from exc
