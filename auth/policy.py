"""
auth/policy.py -- Password policy validator.

Rules run in a fixed order and the first failure wins, so the same bad
password always produces the same message:

  1. length  -- non-empty, at least 8, at most 128 characters
  2. at least one uppercase letter
  3. at least one lowercase letter
  4. at least one ASCII digit (0-9)

Pure function: no I/O, no state. Shared by signup, change-password and user
update so the three flows can never drift apart.
"""

from __future__ import annotations

from collections.abc import Callable

from core.errors import PasswordPolicyError

MIN_LENGTH = 8
MAX_LENGTH = 128


def _check_length(password: str) -> str | None:
    if not password:
        return "Password cannot be empty"
    if len(password) < MIN_LENGTH:
        return f"Password must be at least {MIN_LENGTH} characters long"
    if len(password) > MAX_LENGTH:
        return "Password is too long"
    return None


def _check_uppercase(password: str) -> str | None:
    if not any(c.isupper() for c in password):
        return "Password must contain at least one uppercase letter"
    return None


def _check_lowercase(password: str) -> str | None:
    if not any(c.islower() for c in password):
        return "Password must contain at least one lowercase letter"
    return None


def _check_digit(password: str) -> str | None:
    if not any("0" <= c <= "9" for c in password):
        return "Password must contain at least one digit"
    return None


_RULES: tuple[Callable[[str], str | None], ...] = (
    _check_length,
    _check_uppercase,
    _check_lowercase,
    _check_digit,
)


def password_violation(password: str) -> str | None:
    """Return the message for the first rule password breaks, or None if it passes."""
    for rule in _RULES:
        reason = rule(password)
        if reason is not None:
            return reason
    return None


def validate_password(password: str) -> None:
    """Raise PasswordPolicyError if password breaks any rule."""
    reason = password_violation(password)
    if reason is not None:
        raise PasswordPolicyError(reason)
