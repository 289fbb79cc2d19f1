"""
api/routes/auth.py -- Signup and login endpoints.

Routes:
  POST /auth/signup   -- register; 201 {token, user}
  POST /auth/login    -- password login; 200 {token, user}

Both handlers are plain `def`: argon2 is CPU- and memory-bound, so FastAPI
runs them in its threadpool instead of blocking the event loop.

Errors raised by AuthService (policy, conflict, bad credentials, internal)
propagate to the exception handlers in api/main.py, which render the
envelope. Wrong email and wrong password produce the identical 401.
"""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.models import AuthResponse, CredentialsRequest, envelope
from auth.service import AuthService

# Auth policy:
# - POST /auth/signup: public
# - POST /auth/login:  public
router = APIRouter()


@router.post("/auth/signup", status_code=201)
def signup(request: Request, body: CredentialsRequest) -> JSONResponse:
    """Create an account and return a token for it."""
    service: AuthService = request.app.state.auth_service
    result = service.signup(body.email, body.password)
    resp = envelope(AuthResponse.from_result(result), status_code=201)
    resp.headers["Cache-Control"] = "no-store"
    return resp


@router.post("/auth/login")
def login(request: Request, body: CredentialsRequest) -> JSONResponse:
    """Authenticate with email and password."""
    service: AuthService = request.app.state.auth_service
    result = service.login(body.email, body.password)
    resp = envelope(AuthResponse.from_result(result))
    resp.headers["Cache-Control"] = "no-store"
    return resp
