"""Request/response schemas for session endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Credentials for login. Presence is checked by the handler so that it can answer 400."""

    user_name: str | None = Field(default=None, description="User name")
    password: str | None = Field(default=None, description="Password (compared as stored)")


class UserOut(BaseModel):
    """Public identity of a user (no password)."""

    model_config = ConfigDict(from_attributes=True)

    user_id: int
    user_name: str
    role: str | None = None


class SessionUser(UserOut):
    """Claims decoded from a verified session token, injected into protected handlers."""

    model_config = ConfigDict(extra="ignore")

    iat: int
    exp: int


class LoginResponse(BaseModel):
    success: bool = True
    message: str = "Login successful"
    user: UserOut


class CheckAuthResponse(BaseModel):
    """Probe result; user is omitted when not authenticated."""

    authenticated: bool
    user: SessionUser | None = None


class LogoutResponse(BaseModel):
    success: bool = True
    message: str = "Logged out successfully"
