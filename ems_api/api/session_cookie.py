"""Set and clear the session cookie with identical attributes."""

from typing import Any

from fastapi import Response

from ems_api.core.config import Settings


def cookie_attributes(settings: Settings) -> dict[str, Any]:
    """Attributes shared by set and delete; a mismatch leaves stale cookies in some browsers."""
    return {
        "path": "/",
        "httponly": True,
        "secure": settings.is_production,
        # Cross-site frontends need SameSite=None, which browsers only accept with Secure.
        "samesite": "none" if settings.is_production else "lax",
    }


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        key=settings.COOKIE_NAME,
        value=token,
        max_age=settings.JWT_EXPIRE_MINUTES * 60,
        **cookie_attributes(settings),
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(key=settings.COOKIE_NAME, **cookie_attributes(settings))
