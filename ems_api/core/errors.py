"""API error kinds rendered as structured JSON bodies by a single exception handler."""

from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse


class ApiError(Exception):
    """Base for errors that map to a fixed HTTP status and JSON body."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, **extra: Any) -> None:
        self.message = message
        self.extra = extra
        super().__init__(message)

    @property
    def body(self) -> dict[str, Any]:
        return {"message": self.message, **self.extra}


class BadRequestError(ApiError):
    """Required input is missing."""

    status_code = status.HTTP_400_BAD_REQUEST


class UnauthenticatedError(ApiError):
    """No session cookie on the request."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message)


class InvalidSessionError(ApiError):
    """Session cookie present but the token failed verification."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(message)


class InvalidCredentialsError(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


class InternalError(ApiError):
    """Store failure; the underlying message is passed through as `error`."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, error: str, message: str = "Internal server error", **extra: Any) -> None:
        super().__init__(message, error=error, **extra)


async def api_error_handler(_request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.body)
