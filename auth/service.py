"""
auth/service.py -- Authentication workflows: signup, login, password change,
user lookup, update and delete.

AuthService orchestrates the hasher, the policy validator, the token service
and the user store. Each method is one complete unit of work: it either
returns a result or raises a ServiceError, and a failed step never leaves a
partial write behind (a user row always has a usable hash).

Anti-enumeration:
  login() returns the same AuthenticationError for "no such email" and
  "wrong password", and runs argon2 in both cases so response time does not
  reveal whether an email is registered.

Layer rule: no imports from api/.
"""

from __future__ import annotations

import logging

from auth.models import AuthResult, PublicUser, User
from auth.passwords import Hasher
from auth.policy import validate_password
from auth.store import UserStore
from auth.tokens import TokenService
from core.errors import AuthenticationError, BadRequestError, NotFoundError, RepositoryError

logger = logging.getLogger("authservice.auth")


class AuthService:
    def __init__(self, store: UserStore, hasher: Hasher, tokens: TokenService) -> None:
        self.store = store
        self.hasher = hasher
        self.tokens = tokens
        # Verified against when the email is unknown, to equalize login timing.
        self._dummy_hash = hasher.hash("authservice-timing-dummy")

    # ------------------------------------------------------------------
    # Credential flows
    # ------------------------------------------------------------------

    def signup(self, email: str, password: str) -> AuthResult:
        """Register a new user and return a token for it.

        Order: policy -> hash -> insert -> token. The store's UNIQUE
        constraint raises ConflictError for a taken email.
        """
        validate_password(password)
        password_hash = self.hasher.hash(password)
        user = self.store.insert(email, password_hash)
        token = self.tokens.issue(user.id)
        logger.info("Registered user %s", user.id)
        return AuthResult(token=token, user=PublicUser.from_user(user))

    def login(self, email: str, password: str) -> AuthResult:
        """Verify credentials and return a fresh token.

        Hashes made with older cost parameters are upgraded in place on a
        successful login. A failed upgrade is logged and does not fail the
        login; the old hash stays valid and is retried next time.
        """
        user = self.store.find_by_email(email)
        if user is None:
            self.hasher.verify(password, self._dummy_hash)
            raise AuthenticationError()
        if not self.hasher.verify(password, user.password_hash):
            raise AuthenticationError()

        if self.hasher.needs_rehash(user.password_hash):
            try:
                self.store.update_password_hash(user.id, self.hasher.hash(password))
                logger.info("Upgraded password hash parameters for user %s", user.id)
            except RepositoryError:
                logger.warning("Could not store upgraded password hash for user %s", user.id, exc_info=True)

        token = self.tokens.issue(user.id)
        logger.info("Login: %s", user.id)
        return AuthResult(token=token, user=PublicUser.from_user(user))

    def change_password(self, user_id: str, old_password: str, new_password: str) -> None:
        """Replace the acting user's password after checking the old one."""
        if not old_password or not new_password:
            raise BadRequestError("Old and new passwords cannot be empty")
        validate_password(new_password)
        user = self._get(user_id)
        if not self.hasher.verify(old_password, user.password_hash):
            raise AuthenticationError("Invalid old password")
        if not self.store.update_password_hash(user.id, self.hasher.hash(new_password)):
            raise NotFoundError()
        logger.info("Password changed for user %s", user.id)

    # ------------------------------------------------------------------
    # Direct user operations
    # ------------------------------------------------------------------

    def get_user(self, user_id: str) -> PublicUser:
        return PublicUser.from_user(self._get(user_id))

    def get_user_by_email(self, email: str) -> PublicUser:
        user = self.store.find_by_email(email)
        if user is None:
            raise NotFoundError()
        return PublicUser.from_user(user)

    def update_user(self, user_id: str, email: str | None = None, password: str | None = None) -> PublicUser:
        """Partially update a user's email and/or password in one transaction.

        A new password must pass the same policy as signup.
        """
        if email is None and password is None:
            raise BadRequestError("No fields to update")
        password_hash = None
        if password is not None:
            validate_password(password)
            password_hash = self.hasher.hash(password)
        if not self.store.update(user_id, email=email, password_hash=password_hash):
            raise NotFoundError()
        logger.info("Updated user %s", user_id)
        return self.get_user(user_id)

    def delete_user(self, user_id: str) -> None:
        """Delete a user. Raises NotFoundError if the id never existed."""
        if not self.store.delete(user_id):
            raise NotFoundError()
        logger.info("Deleted user %s", user_id)

    def _get(self, user_id: str) -> User:
        user = self.store.find_by_id(user_id)
        if user is None:
            raise NotFoundError()
        return user
