"""
auth/models.py -- Domain dataclasses for authentication entities.

Pattern: Data class (pure data container, almost no logic). The store builds
User from rows; the service projects User to PublicUser before anything
leaves the auth layer.

Layer rule: no imports from api/.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class User:
    """A stored identity.

    id is a UUID4 string assigned by the store at insert time and never
    reassigned. password_hash is the argon2 PHC string; it must never be
    serialized to a client -- use PublicUser.from_user() for any outward view.
    """

    id: str
    email: str
    password_hash: str
    created_at: str


@dataclass(frozen=True)
class PublicUser:
    """Client-safe projection of User (no password_hash field exists here)."""

    id: str
    email: str
    created_at: str

    @classmethod
    def from_user(cls, user: User) -> PublicUser:
        return cls(id=user.id, email=user.email, created_at=user.created_at)


@dataclass(frozen=True)
class Claims:
    """Verified token payload. exp is always iat + the fixed token TTL."""

    sub: str
    iat: int
    exp: int


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a successful signup or login."""

    token: str
    user: PublicUser
