"""
auth/dependencies.py -- FastAPI Depends() helpers for authentication.

Protected routes identify the caller with an Authorization: Bearer <token>
header. Every way that can fail -- header missing, another scheme, empty
token, bad signature, malformed token, expired token -- raises the same
InvalidTokenError, so a client learns nothing about which check failed.

try_get_current_user_id() is the soft variant (returns None on failure).
get_current_user_id() wraps it and raises InvalidTokenError (-> 401).

Layer rule: no imports from api/.
  auth/dependencies.py may import from fastapi (for Request) because this
  module is part of the FastAPI dependency injection system.
"""

from __future__ import annotations

from fastapi import Request

from auth.tokens import TokenService
from core.errors import InvalidTokenError

_SCHEME = "Bearer "


def try_get_current_user_id(request: Request) -> str | None:
    """Return the user id from a valid bearer token, or None. Never raises InvalidTokenError."""
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith(_SCHEME):
        return None
    token = auth_header[len(_SCHEME):].strip()
    if not token:
        return None
    token_service: TokenService = request.app.state.token_service
    try:
        return token_service.verify(token).sub
    except InvalidTokenError:
        return None


def get_current_user_id(request: Request) -> str:
    """Require a valid bearer token. Raises InvalidTokenError otherwise.

    Use as a FastAPI dependency:
        @router.get("/me")
        def me(request: Request, user_id: str = Depends(get_current_user_id)): ...
    """
    user_id = try_get_current_user_id(request)
    if user_id is None:
        raise InvalidTokenError()
    return user_id
