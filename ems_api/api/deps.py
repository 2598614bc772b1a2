"""Request-scoped dependencies: settings and the session (cookie JWT) gate."""

from typing import Annotated, Any

from fastapi import Depends, Request
from pydantic import ValidationError

from ems_api.core.config import Settings
from ems_api.core.errors import InvalidSessionError, UnauthenticatedError
from ems_api.core.security import SessionTokenError, verify_session_token
from ems_api.schemas.auth import SessionUser


def get_app_settings(request: Request) -> Settings:
    """Settings built once in create_app and stored on app.state."""
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


def decode_session_cookie(request: Request, settings: Settings) -> dict[str, Any] | None:
    """
    Return verified claims from the session cookie, or None when no cookie is sent.
    Raises SessionTokenError when the cookie does not verify.
    """
    token = request.cookies.get(settings.COOKIE_NAME)
    if not token:
        return None
    return verify_session_token(
        token,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def get_current_user(request: Request, settings: SettingsDep) -> SessionUser:
    """Dependency: require a valid session cookie. Raises 401 if missing or invalid."""
    try:
        claims = decode_session_cookie(request, settings)
    except SessionTokenError:
        raise InvalidSessionError()
    if claims is None:
        raise UnauthenticatedError()
    try:
        return SessionUser.model_validate(claims)
    except ValidationError:
        raise InvalidSessionError()


CurrentUserDep = Annotated[SessionUser, Depends(get_current_user)]
