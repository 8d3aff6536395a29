"""FastAPI dependencies for the store, sessions and current user."""

from fastapi import Cookie, Depends, Request

from bono.core.exceptions import forbidden_exception, unauthorized_exception
from bono.models.user import User
from bono.services.record_store import RecordStore
from bono.services.registration_service import (
    RegistrationService,
    create_registration_service,
)
from bono.services.session_store import SessionStore

SESSION_COOKIE = "bono_session"


def get_record_store(request: Request) -> RecordStore:
    """Record store built once in the application lifespan."""
    return request.app.state.record_store


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_registration_service(
    store: RecordStore = Depends(get_record_store),
) -> RegistrationService:
    """Create registration service with dependencies."""
    return create_registration_service(store)


async def get_current_user(
    bono_session: str | None = Cookie(None),
    sessions: SessionStore = Depends(get_session_store),
    store: RecordStore = Depends(get_record_store),
) -> User:
    """Resolve the session cookie to the stored user record."""
    if not bono_session:
        raise unauthorized_exception()
    snapshot = await sessions.get_current_user(bono_session)
    if snapshot is None:
        raise unauthorized_exception("Session expired")
    # Prefer the live record so role changes apply immediately.
    return store.find_user_by_id(snapshot.id) or snapshot


async def require_admin(user: User = Depends(get_current_user)) -> User:
    if not user.is_admin:
        raise forbidden_exception()
    return user
