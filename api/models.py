"""
API request and response models for the auth service REST endpoints.

These Pydantic v2 models define the HTTP transport contract for the API layer.
They are intentionally separate from the dataclasses in auth/models.py, which
own the internal domain representation. Route handlers map between the two.

Every JSON response uses one envelope:

    {"status": 201, "data": {...}}           success
    {"status": 401, "error": "message"}      failure

data and error are never both present. envelope() builds the success form;
api/main.py builds the failure form in its exception handlers.
"""

from typing import Any, Optional

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from auth.models import AuthResult, PublicUser

# Upper bound on any password field in a request body, checked before hashing.
MAX_PASSWORD_INPUT = 1024

# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class CredentialsRequest(BaseModel):
    """Request body for POST /auth/signup and POST /auth/login.

    password carries only a hard cap that keeps oversized input away from
    argon2. The password policy owns the real length rules so signup reports
    them with its own messages.
    """

    email: str = Field(min_length=1, max_length=255)
    password: str = Field(max_length=MAX_PASSWORD_INPUT)


class ChangePasswordRequest(BaseModel):
    """Request body for PUT /me/password."""

    old_password: str = Field(max_length=MAX_PASSWORD_INPUT)
    new_password: str = Field(max_length=MAX_PASSWORD_INPUT)


class UserUpdateRequest(BaseModel):
    """Request body for PUT /user/{id}. Omitted fields are left unchanged."""

    email: Optional[str] = Field(default=None, min_length=1, max_length=255)
    password: Optional[str] = Field(default=None, max_length=MAX_PASSWORD_INPUT)


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class PublicUserResponse(BaseModel):
    """Client-facing user. Has no password_hash field by construction."""

    model_config = ConfigDict(frozen=True)

    id: str
    email: str
    created_at: str

    @classmethod
    def from_public_user(cls, user: PublicUser) -> "PublicUserResponse":
        return cls(id=user.id, email=user.email, created_at=user.created_at)


class AuthResponse(BaseModel):
    """data payload of a successful signup or login."""

    token: str
    user: PublicUserResponse

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthResponse":
        return cls(token=result.token, user=PublicUserResponse.from_public_user(result.user))


class ApiResponse(BaseModel):
    """The response envelope. Exactly one of data / error is set."""

    status: int
    data: Optional[Any] = None
    error: Optional[str] = None


# ---------------------------------------------------------------------------
# Envelope helpers
# ---------------------------------------------------------------------------


def envelope(data: Any, status_code: int = 200) -> JSONResponse:
    """Wrap data (a model or a plain JSON value) in a success envelope."""
    if isinstance(data, BaseModel):
        data = data.model_dump()
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse(status=status_code, data=data).model_dump(exclude_none=True),
    )


def error_envelope(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse(status=status_code, error=message).model_dump(exclude_none=True),
    )
