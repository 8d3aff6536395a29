"""Session-scoped storage of the logged-in user snapshot."""

import json
import logging
import secrets

from pydantic import ValidationError

from bono.core.storage import KeyValueBackend
from bono.models.user import User

logger = logging.getLogger(__name__)


class SessionStore:
    """currentUser snapshots kept in the backend with automatic TTL expiration."""

    PREFIX = "session:"
    FIELD = "currentUser"

    def __init__(self, backend: KeyValueBackend, ttl_seconds: int):
        self.backend = backend
        self.ttl_seconds = ttl_seconds

    def _key(self, token: str) -> str:
        return f"{self.PREFIX}{token}:{self.FIELD}"

    async def create(self, user: User) -> str:
        """Store a snapshot of user and return the new session token."""
        token = secrets.token_urlsafe(32)
        await self.backend.set(
            self._key(token),
            json.dumps(user.snapshot(), ensure_ascii=False),
            ttl_seconds=self.ttl_seconds,
        )
        logger.debug(f"Created session for {user.username} (TTL: {self.ttl_seconds}s)")
        return token

    async def get_current_user(self, token: str) -> User | None:
        raw = await self.backend.get(self._key(token))
        if raw is None:
            return None
        try:
            return User.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Discarding unreadable session snapshot: {e}")
            await self.backend.delete(self._key(token))
            return None

    async def destroy(self, token: str) -> None:
        await self.backend.delete(self._key(token))
