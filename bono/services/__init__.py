"""Application services."""

from bono.services.record_store import RecordStore
from bono.services.registration_service import (
    RegistrationService,
    create_registration_service,
)
from bono.services.session_store import SessionStore

__all__ = [
    "RecordStore",
    "RegistrationService",
    "SessionStore",
    "create_registration_service",
]
