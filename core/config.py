"""
core/config.py -- Centralized application configuration via pydantic-settings.

All environment variable reads for the auth service happen here. No module
should call os.getenv() or os.environ.get() directly -- import get_settings()
instead.

Design patterns used:
  Singleton via lru_cache: get_settings() instantiates Settings once at first
      call and returns the cached instance on every subsequent call.

  BaseSettings (pydantic-settings): Reads values from environment variables
      and an optional .env file automatically. Field names map to env var names
      (e.g. jwt_secret -> JWT_SECRET, database_url -> DATABASE_URL).

  @model_validator(mode="after"): Runs the startup-time checks for the two
      required process inputs. A missing DATABASE_URL or JWT_SECRET is fatal
      when Settings is built, never discovered on a request.

Security notes:
  JWT_SECRET shorter than 32 chars is rejected outright. HS256 signing relies
  on key entropy -- a short key makes offline brute-force of tokens feasible.

Layer rule: core/ is the kernel. This module may not import from api/ or auth/.
"""

import logging
import secrets
from functools import lru_cache
from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("authservice.config")

_DEV_DB_URL = f"sqlite:///{Path(__file__).resolve().parent.parent / 'authservice_dev.db'}"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    Dev mode (DEBUG=true) fills in a random JWT_SECRET and a local SQLite
    database so the service starts with no configuration at all. Production
    mode refuses to start without both.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Core
    # ------------------------------------------------------------------

    debug: bool = False
    log_level: str = "INFO"
    # Empty string is the sentinel for "not configured" on both fields below.
    database_url: str = ""
    jwt_secret: str = ""

    # ------------------------------------------------------------------
    # Password hashing (argon2id cost parameters)
    # ------------------------------------------------------------------

    argon2_time_cost: int = 3
    argon2_memory_cost: int = 65536  # KiB
    argon2_parallelism: int = 4

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------

    cors_origins: list[str] = ["*"]
    # When true, PUT/DELETE /user/{id} require a bearer token for that same id.
    enforce_user_ownership: bool = False

    # ------------------------------------------------------------------
    # Validators
    # ------------------------------------------------------------------

    @model_validator(mode="after")
    def validate_required_inputs(self) -> "Settings":
        """Enforce the DATABASE_URL and JWT_SECRET policy.

        Dev mode: generate a throwaway secret and fall back to a local SQLite
            file, logging a warning for each. Tokens will not survive restart.

        Production mode: both values must be set, and JWT_SECRET must be at
            least 32 characters long.
        """
        if not self.database_url:
            if self.debug:
                self.database_url = _DEV_DB_URL
                logger.warning("DATABASE_URL not set -- using local SQLite database %s", _DEV_DB_URL)
            else:
                raise ValueError(
                    "DATABASE_URL is required in production mode. "
                    "Set DATABASE_URL in your environment or .env file. "
                    "To run in development mode, set DEBUG=true."
                )
        if not self.jwt_secret:
            if self.debug:
                self.jwt_secret = secrets.token_hex(32)
                logger.warning("Using auto-generated JWT_SECRET. Tokens will not persist across restarts.")
            else:
                raise ValueError(
                    "JWT_SECRET is required in production mode. "
                    "Set JWT_SECRET in your environment or .env file. "
                    "To run in development mode, set DEBUG=true."
                )
        if len(self.jwt_secret) < 32:
            raise ValueError("JWT_SECRET must be at least 32 characters.")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return the application Settings singleton.

    In tests: call get_settings.cache_clear() between test cases if you need
    to inject different environment variables.
    """
    return Settings()
