"""
api/routes/users.py -- User lookup and profile mutation endpoints.

Routes:
  GET    /me                    -- current user (bearer token)
  PUT    /me/password           -- change own password (bearer token); 204
  GET    /user/by-email/{email} -- look up by email
  GET    /user/{user_id}        -- look up by id
  PUT    /user/{user_id}        -- update email and/or password; 200 updated user
  DELETE /user/{user_id}        -- delete; 204

Ownership: the /user/{user_id} mutations carry no ownership check unless
ENFORCE_USER_OWNERSHIP is set, in which case the bearer token must belong to
user_id (401 without a valid token, 403 for someone else's id).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from api.models import ChangePasswordRequest, PublicUserResponse, UserUpdateRequest, envelope
from auth.dependencies import get_current_user_id
from auth.service import AuthService
from core.config import Settings
from core.errors import ForbiddenError

# Auth policy:
# - GET /me, PUT /me/password:       require bearer token (get_current_user_id)
# - GET /user/*:                     public
# - PUT/DELETE /user/{user_id}:      public, or owner-only with ENFORCE_USER_OWNERSHIP
router = APIRouter()


# ---------------------------------------------------------------------------
# Bearer-authenticated endpoints
# ---------------------------------------------------------------------------


@router.get("/me")
def me(request: Request, user_id: str = Depends(get_current_user_id)) -> JSONResponse:
    """Return the user the bearer token belongs to."""
    service: AuthService = request.app.state.auth_service
    return envelope(PublicUserResponse.from_public_user(service.get_user(user_id)))


@router.put("/me/password", status_code=204)
def change_password(
    request: Request,
    body: ChangePasswordRequest,
    user_id: str = Depends(get_current_user_id),
) -> Response:
    """Change the caller's password. The old password must be supplied."""
    service: AuthService = request.app.state.auth_service
    service.change_password(user_id, body.old_password, body.new_password)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Direct-id endpoints
# ---------------------------------------------------------------------------


@router.get("/user/by-email/{email}")
def get_user_by_email(request: Request, email: str) -> JSONResponse:
    service: AuthService = request.app.state.auth_service
    return envelope(PublicUserResponse.from_public_user(service.get_user_by_email(email)))


@router.get("/user/{user_id}")
def get_user(request: Request, user_id: str) -> JSONResponse:
    service: AuthService = request.app.state.auth_service
    return envelope(PublicUserResponse.from_public_user(service.get_user(user_id)))


@router.put("/user/{user_id}")
def update_user(request: Request, user_id: str, body: UserUpdateRequest) -> JSONResponse:
    """Update email and/or password. Both are written in one transaction."""
    _check_ownership(request, user_id)
    service: AuthService = request.app.state.auth_service
    updated = service.update_user(user_id, email=body.email, password=body.password)
    return envelope(PublicUserResponse.from_public_user(updated))


@router.delete("/user/{user_id}", status_code=204)
def delete_user(request: Request, user_id: str) -> Response:
    """Delete a user. 404 if the id never existed."""
    _check_ownership(request, user_id)
    service: AuthService = request.app.state.auth_service
    service.delete_user(user_id)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _check_ownership(request: Request, user_id: str) -> None:
    settings: Settings = request.app.state.settings
    if not settings.enforce_user_ownership:
        return
    if get_current_user_id(request) != user_id:
        raise ForbiddenError("You may only modify your own account")
