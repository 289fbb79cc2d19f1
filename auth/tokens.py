"""
auth/tokens.py -- Bearer token issuance and verification.

Security design decisions:
  JWT: python-jose with HS256. Tokens carry only the user id (sub), the issue
       time (iat) and the expiry (exp = iat + 24h). There is no refresh: a
       token's lifetime is fixed the moment it is signed.

  Verification: every failure -- bad signature, malformed token, missing
       claims, expiry -- raises the same InvalidTokenError with the same
       message. Callers (and attackers) cannot tell which check failed. The
       real reason is logged at DEBUG for operators.

  Secret: passed to TokenService at construction. api/main.py builds one
       instance at startup from Settings.jwt_secret; nothing here reads the
       environment.

Layer rule: no imports from api/.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from auth.models import Claims
from core.errors import ConfigError, InvalidTokenError

logger = logging.getLogger("authservice.auth")

ALGORITHM = "HS256"
TOKEN_TTL = timedelta(hours=24)


class TokenService:
    """Signs and verifies time-bounded identity tokens with a symmetric key."""

    def __init__(self, secret_key: str) -> None:
        self._secret_key = secret_key

    def issue(self, user_id: str) -> str:
        """Return a signed token for user_id that expires TOKEN_TTL from now.

        Raises ConfigError if the service was built without a signing key.
        """
        if not self._secret_key:
            raise ConfigError("JWT signing key is not configured")
        issued_at = datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + TOKEN_TTL).timestamp()),
        }
        return jwt.encode(payload, self._secret_key, algorithm=ALGORITHM)

    def verify(self, token: str) -> Claims:
        """Return the Claims of a valid, unexpired token.

        Raises InvalidTokenError on any failure. exp must be strictly in the
        future; python-jose accepts exp == now, so that edge is checked here.
        """
        if not self._secret_key:
            raise ConfigError("JWT signing key is not configured")
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[ALGORITHM])
        except JWTError as exc:
            logger.debug("Token rejected: %s", exc)
            raise InvalidTokenError() from None

        sub = payload.get("sub")
        exp = payload.get("exp")
        iat = payload.get("iat", 0)
        if not isinstance(sub, str) or not sub or not isinstance(exp, int):
            logger.debug("Token rejected: missing or mistyped claims")
            raise InvalidTokenError()
        if exp <= int(datetime.now(timezone.utc).timestamp()):
            logger.debug("Token rejected: expired at %d", exp)
            raise InvalidTokenError()
        return Claims(sub=sub, iat=int(iat), exp=exp)
