"""
core/errors.py -- Error taxonomy shared by the auth and api layers.

Every failure the service reports is a ServiceError subclass. The api layer
maps each class to an HTTP status (see api/main.py); nothing below the api
layer knows about status codes.

  AuthenticationError   bad credentials, missing/invalid bearer token
    InvalidTokenError   any token failure -- signature, structure, expiry
  ConflictError         email already registered
  BadRequestError       malformed or unacceptable input
    PasswordPolicyError candidate password violates the policy
  NotFoundError         target user does not exist
  ForbiddenError        caller may not act on the target
  InternalError         infrastructure failure; message is never shown to clients
    RepositoryError     store/driver failure
    HashingError        argon2 failure or malformed stored hash
    ConfigError         required configuration missing at call time

Layer rule: core/ is the kernel. No imports from api/ or auth/.
"""

from __future__ import annotations


class ServiceError(Exception):
    """Base class for all expected service failures.

    message is safe to show to clients for every subclass except
    InternalError, whose message is only logged.
    """

    default_message = "Request failed."
    code = "error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthenticationError(ServiceError):
    default_message = "Invalid credentials"
    code = "unauthorized"


class InvalidTokenError(AuthenticationError):
    default_message = "Invalid or expired token"
    code = "invalid_token"


class ConflictError(ServiceError):
    default_message = "Email is already taken"
    code = "conflict"


class BadRequestError(ServiceError):
    default_message = "Bad request"
    code = "bad_request"


class PasswordPolicyError(BadRequestError):
    code = "password_policy"


class NotFoundError(ServiceError):
    default_message = "User not found"
    code = "not_found"


class ForbiddenError(ServiceError):
    default_message = "Forbidden"
    code = "forbidden"


class InternalError(ServiceError):
    default_message = "Internal server error"
    code = "internal_error"


class RepositoryError(InternalError):
    code = "database_error"


class HashingError(InternalError):
    code = "hashing_error"


class ConfigError(InternalError):
    code = "config_error"
