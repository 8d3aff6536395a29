"""Record models."""

from bono.models.application import Application, ApplicationStatus, Documents
from bono.models.user import User, UserRole

__all__ = [
    "Application",
    "ApplicationStatus",
    "Documents",
    "User",
    "UserRole",
]
