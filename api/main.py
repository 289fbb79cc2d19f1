"""
api/main.py -- FastAPI application entry point for the auth service.

Run with:  uvicorn asgi:app --reload

Middleware stack (outermost to innermost):
  1. CORSMiddleware     -- adds CORS headers for allowed browser origins
  2. log_requests       -- one access-log line per request with latency

Lifespan builds the shared resources once at startup -- the user store (and
its connection pool), the token service holding the signing secret, and the
AuthService that ties them together -- and disposes the pool on shutdown.

Settings are loaded at import time, so a missing DATABASE_URL or JWT_SECRET
stops the process before it accepts a single request.
"""

from __future__ import annotations

import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.models import envelope, error_envelope
from api.routes.auth import router as auth_router
from api.routes.users import router as users_router
from auth.passwords import Hasher
from auth.service import AuthService
from auth.store import UserStore
from auth.tokens import TokenService
from core.config import Settings, get_settings
from core.errors import (
    AuthenticationError,
    BadRequestError,
    ConflictError,
    ForbiddenError,
    InternalError,
    NotFoundError,
    ServiceError,
)

_settings = get_settings()

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=_settings.log_level.upper(),
    format="%(asctime)s %(levelname)-5s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("authservice.api")

_HEALTH_MESSAGE = "Service is up and running"

# ---------------------------------------------------------------------------
# Lifespan -- startup / shutdown
# ---------------------------------------------------------------------------


def build_auth_service(store: UserStore, settings: Settings) -> AuthService:
    """Assemble AuthService from a store and the configured hasher/token service."""
    hasher = Hasher(
        time_cost=settings.argon2_time_cost,
        memory_cost=settings.argon2_memory_cost,
        parallelism=settings.argon2_parallelism,
    )
    return AuthService(store, hasher, TokenService(settings.jwt_secret))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the store and services on startup; dispose the pool on shutdown."""
    logger.info("Auth service starting up")
    app.state.settings = _settings
    app.state.user_store = UserStore(_settings.database_url)
    app.state.auth_service = build_auth_service(app.state.user_store, _settings)
    app.state.token_service = app.state.auth_service.tokens
    logger.info("User store initialized")

    yield

    app.state.user_store.close()
    logger.info("Auth service shutdown complete")


# ---------------------------------------------------------------------------
# App instantiation
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Auth Service",
    description="User registration, login, bearer tokens and profile updates.",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
    max_age=3600,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s %d %.1fms %s",
        request.method,
        request.url.path,
        response.status_code,
        ms,
        request.client.host if request.client else "unknown",
    )
    return response


# ---------------------------------------------------------------------------
# Router registration
# ---------------------------------------------------------------------------

app.include_router(auth_router, tags=["Auth"])
app.include_router(users_router, tags=["Users"])


# ---------------------------------------------------------------------------
# Exception handlers
#
# Every failure is rendered as {"status": <code>, "error": <message>}.
# InternalError subclasses are logged with their full cause chain and shown
# to the client only as "Internal server error".
# ---------------------------------------------------------------------------

_STATUS_BY_ERROR: tuple[tuple[type[ServiceError], int], ...] = (
    (AuthenticationError, 401),
    (ConflictError, 401),
    (BadRequestError, 400),
    (NotFoundError, 404),
    (ForbiddenError, 403),
    (InternalError, 500),
)


def status_for(exc: ServiceError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return 500


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(
            "%s on %s %s: %s",
            exc.code,
            request.method,
            request.url.path,
            exc.message,
            exc_info=exc,
        )
        return error_envelope(InternalError.default_message, status_code)
    return error_envelope(exc.message, status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return 400 when the request body or path parameters fail validation."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        detail = " ".join(part for part in (field, first.get("msg", "")) if part)
        message = f"Invalid request: {detail}" if detail else "Invalid request"
    else:
        message = "Invalid request"
    return error_envelope(message, 400)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Wrap routing errors (404 unknown path, 405 wrong method) in the envelope."""
    return error_envelope(str(exc.detail), exc.status_code)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unexpected server errors.

    The raw exception goes to the log only, never to the response body.
    """
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return error_envelope(InternalError.default_message, 500)


# ---------------------------------------------------------------------------
# Health endpoint
#
# Defined directly in main.py (not in a router) so it is always reachable
# regardless of router registration state. No auth.
# ---------------------------------------------------------------------------


@app.get("/health", tags=["Health"])
async def health() -> JSONResponse:
    return envelope(_HEALTH_MESSAGE)
