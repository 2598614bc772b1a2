"""Session token codec: signed, time-limited JWTs carrying user identity claims."""

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

DEFAULT_ALGORITHM = "HS256"


class SessionTokenError(Exception):
    """Token could not be verified; callers treat every subclass the same way."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class InvalidSignature(SessionTokenError):
    """Token is malformed, tampered with, or signed with a different secret."""


class TokenExpired(SessionTokenError):
    """Token signature is valid but its exp is in the past."""


def issue_session_token(
    claims: dict[str, Any],
    secret: str,
    ttl: timedelta,
    algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """
    Sign claims plus iat/exp into a compact JWT.
    The input dict is not modified.
    """
    now = datetime.now(UTC)
    payload: dict[str, Any] = {
        **claims,
        "iat": now,
        "exp": now + ttl,
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def verify_session_token(
    token: str,
    secret: str,
    algorithm: str = DEFAULT_ALGORITHM,
) -> dict[str, Any]:
    """
    Decode and validate a session token; return its claims (including iat, exp).
    Raises TokenExpired or InvalidSignature.
    """
    try:
        return jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"require": ["exp", "iat"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenExpired("Session token has expired", cause=e) from e
    except jwt.PyJWTError as e:
        raise InvalidSignature("Session token is invalid", cause=e) from e
