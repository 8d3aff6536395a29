"""Authentication router: login, logout and current session."""

import logging

from fastapi import APIRouter, Cookie, Depends, Response

from bono.core.config import settings
from bono.core.exceptions import (
    AuthenticationError,
    StorageError,
    storage_unavailable_exception,
    unauthorized_exception,
)
from bono.models.user import User
from bono.schemas.auth import LoginRequest, UserPublic
from bono.services.dependencies import (
    SESSION_COOKIE,
    get_current_user,
    get_record_store,
    get_session_store,
)
from bono.services.record_store import RecordStore
from bono.services.session_store import SessionStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _authenticate(store: RecordStore, credentials: LoginRequest) -> User:
    user = store.authenticate(credentials.username, credentials.password)
    if user is None:
        raise AuthenticationError("Usuario o contraseña incorrectos")
    return user


@router.post("/login", response_model=UserPublic)
async def login(
    credentials: LoginRequest,
    response: Response,
    store: RecordStore = Depends(get_record_store),
    sessions: SessionStore = Depends(get_session_store),
):
    """Check credentials and open a session holding the user snapshot."""
    try:
        user = _authenticate(store, credentials)
        token = await sessions.create(user)
    except AuthenticationError as e:
        logger.warning(f"Failed login for {credentials.username!r}")
        raise unauthorized_exception(e.detail)
    except StorageError as e:
        logger.error(f"Storage error during login: {e}")
        raise storage_unavailable_exception()

    response.set_cookie(
        key=SESSION_COOKIE,
        value=token,
        max_age=settings.session_ttl_seconds,
        httponly=True,
        samesite="lax",
        secure=settings.cookie_secure,
    )
    logger.info(f"User {user.username} logged in")
    return UserPublic.from_user(user)


@router.post("/logout")
async def logout(
    response: Response,
    bono_session: str | None = Cookie(None),
    sessions: SessionStore = Depends(get_session_store),
):
    """Drop the current session, if any."""
    if bono_session:
        try:
            await sessions.destroy(bono_session)
        except StorageError as e:
            logger.error(f"Storage error during logout: {e}")
            raise storage_unavailable_exception()
    response.delete_cookie(SESSION_COOKIE)
    return {"logged_out": True}


@router.get("/me", response_model=UserPublic)
async def me(user: User = Depends(get_current_user)):
    """Return the logged-in user."""
    return UserPublic.from_user(user)
