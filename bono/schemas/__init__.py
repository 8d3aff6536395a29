"""Pydantic schemas for request/response validation."""

from bono.schemas.auth import LoginRequest, UserPublic
from bono.schemas.dashboard import (
    AdminApplicationRow,
    AdminListResponse,
    ApplicationCounts,
    DashboardResponse,
)
from bono.schemas.registration import (
    FieldError,
    RegistrationRequest,
    RegistrationResult,
)

__all__ = [
    "AdminApplicationRow",
    "AdminListResponse",
    "ApplicationCounts",
    "DashboardResponse",
    "FieldError",
    "LoginRequest",
    "RegistrationRequest",
    "RegistrationResult",
    "UserPublic",
]
