"""Cookie-session login, logout and check-auth endpoints."""

import logging
from datetime import timedelta
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, Response
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ems_api.api.deps import SettingsDep, decode_session_cookie
from ems_api.api.session_cookie import clear_session_cookie, set_session_cookie
from ems_api.core.database import get_db
from ems_api.core.errors import BadRequestError, InternalError, InvalidCredentialsError
from ems_api.core.security import SessionTokenError, issue_session_token
from ems_api.schemas.auth import (
    CheckAuthResponse,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    SessionUser,
    UserOut,
)
from ems_api.services.store import find_user_by_credentials

logger = logging.getLogger(__name__)

router = APIRouter()


def _credential(value: Any) -> str | None:
    """Scalar JSON values become text; objects, arrays and falsy values count as missing."""
    if isinstance(value, (dict, list)) or not value:
        return None
    if isinstance(value, bool):
        return "true"
    return str(value)


async def read_login_body(request: Request) -> LoginRequest:
    """
    Parse the login body by hand so that a non-JSON, malformed or incomplete body
    answers 400 instead of a validation error.
    """
    payload: Any = {}
    if "json" in request.headers.get("content-type", "").lower():
        try:
            payload = await request.json()
        except ValueError:
            payload = {}
    if not isinstance(payload, dict):
        payload = {}

    body = LoginRequest(
        user_name=_credential(payload.get("user_name")),
        password=_credential(payload.get("password")),
    )
    if not body.user_name or not body.password:
        raise BadRequestError("All fields are required!")
    return body


@router.post(
    "/login",
    response_model=LoginResponse,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": LoginRequest.model_json_schema()}},
        }
    },
)
def login(
    response: Response,
    body: Annotated[LoginRequest, Depends(read_login_body)],
    db: Annotated[Session, Depends(get_db)],
    settings: SettingsDep,
) -> LoginResponse:
    """
    Check user_name/password against the user table and set the session cookie.
    The token carries user_id, user_name and role and expires after JWT_EXPIRE_MINUTES.
    """
    try:
        user = find_user_by_credentials(db, body.user_name, body.password)
    except SQLAlchemyError as e:
        logger.exception("Login query failed")
        raise InternalError(str(e)) from e

    if user is None:
        logger.info("Login rejected for user_name=%r", body.user_name)
        raise InvalidCredentialsError()

    identity = UserOut.model_validate(user)
    token = issue_session_token(
        identity.model_dump(),
        settings.JWT_SECRET.get_secret_value(),
        timedelta(minutes=settings.JWT_EXPIRE_MINUTES),
        algorithm=settings.JWT_ALGORITHM,
    )
    set_session_cookie(response, token, settings)
    return LoginResponse(user=identity)


@router.get(
    "/check-auth",
    response_model=CheckAuthResponse,
    response_model_exclude_unset=True,
)
def check_auth(request: Request, settings: SettingsDep) -> CheckAuthResponse:
    """
    Probe the session cookie. Always 200; never raises for a missing or bad token.
    user is left unset (and so omitted) when not authenticated; claim values are echoed as-is.
    """
    try:
        claims = decode_session_cookie(request, settings)
        if claims is None:
            return CheckAuthResponse(authenticated=False)
        user = SessionUser.model_validate(claims)
    except (SessionTokenError, ValidationError):
        return CheckAuthResponse(authenticated=False)
    return CheckAuthResponse(authenticated=True, user=user)


@router.post("/logout", response_model=LogoutResponse)
def logout(response: Response, settings: SettingsDep) -> LogoutResponse:
    """Clear the session cookie. Idempotent."""
    clear_session_cookie(response, settings)
    return LogoutResponse()
