"""Pydantic request/response schemas."""

from ems_api.schemas.auth import (
    CheckAuthResponse,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    SessionUser,
    UserOut,
)
from ems_api.schemas.health import PingResponse
from ems_api.schemas.reports import (
    DashboardDataResponse,
    GroupedMachinesResponse,
    MachineReadings,
)

__all__ = [
    "CheckAuthResponse",
    "DashboardDataResponse",
    "GroupedMachinesResponse",
    "LoginRequest",
    "LoginResponse",
    "LogoutResponse",
    "MachineReadings",
    "PingResponse",
    "SessionUser",
    "UserOut",
]
