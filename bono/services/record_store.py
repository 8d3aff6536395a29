"""Record store for users and benefit applications."""

import asyncio
import json
import logging
from datetime import UTC, datetime

from pydantic import ValidationError

from bono.core.config import Settings, settings
from bono.core.exceptions import ApplicationNotFoundError, StorageError
from bono.core.storage import KeyValueBackend
from bono.models.application import Application, ApplicationStatus
from bono.models.user import User, UserRole

logger = logging.getLogger(__name__)


class RecordStore:
    """Users and Applications collections backed by a key-value backend.

    Both collections are loaded once by ``initialize`` and then mutated in
    memory. Every mutation re-serializes the whole affected collection and
    writes it back before returning. A failed write raises ``StorageError``
    and leaves the in-memory collections as they were before the call.
    """

    def __init__(self, backend: KeyValueBackend, config: Settings = settings):
        self.backend = backend
        self.config = config
        self.lock = asyncio.Lock()
        self._users: list[User] = []
        self._applications: list[Application] = []

    async def initialize(self) -> None:
        """Load both collections and seed the administrator if missing."""
        self._users = await self._load(self.config.users_key, User)
        self._applications = await self._load(
            self.config.applications_key, Application
        )
        logger.info(
            f"Loaded {len(self._users)} users and "
            f"{len(self._applications)} applications from {self.backend.name}"
        )

        if self.find_user_by_username(self.config.admin_username) is None:
            admin = User(
                username=self.config.admin_username,
                password=self.config.admin_password,
                role=UserRole.ADMIN,
                name=self.config.admin_name,
                email=self.config.admin_email,
                cedula=self.config.admin_cedula,
                phone=self.config.admin_phone,
            )
            await self.save_user(admin)
            logger.info(f"Seeded administrator '{admin.username}'")

    async def _load(self, key: str, model: type[User] | type[Application]) -> list:
        raw = await self.backend.get(key)
        if raw is None:
            return []
        try:
            items = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Corrupt JSON under {key}: {e}")
            raise StorageError(key, f"invalid JSON: {e}") from e
        if not isinstance(items, list):
            raise StorageError(key, "expected a JSON array")
        try:
            return [model.model_validate(item) for item in items]
        except ValidationError as e:
            logger.error(f"Invalid record under {key}: {e}")
            raise StorageError(key, f"invalid record: {e}") from e

    def _dump_users(self) -> str:
        return json.dumps([u.snapshot() for u in self._users], ensure_ascii=False)

    def _dump_applications(self) -> str:
        return json.dumps(
            [a.snapshot() for a in self._applications], ensure_ascii=False
        )

    async def _flush(self, users: bool = False, applications: bool = False) -> None:
        items = {}
        if users:
            items[self.config.users_key] = self._dump_users()
        if applications:
            items[self.config.applications_key] = self._dump_applications()
        if len(items) == 1:
            key, value = next(iter(items.items()))
            await self.backend.set(key, value)
        else:
            await self.backend.set_many(items)

    # Queries

    def list_users(self) -> list[User]:
        return list(self._users)

    def list_applications(self) -> list[Application]:
        return list(self._applications)

    def find_user_by_id(self, user_id: str) -> User | None:
        return next((u for u in self._users if u.id == user_id), None)

    def find_user_by_username(self, username: str) -> User | None:
        return next((u for u in self._users if u.username == username), None)

    def find_user_by_email(self, email: str) -> User | None:
        return next((u for u in self._users if u.email == email), None)

    def find_user_by_cedula(self, cedula: str) -> User | None:
        return next((u for u in self._users if u.cedula == cedula), None)

    def find_application(self, application_id: str) -> Application | None:
        return next((a for a in self._applications if a.id == application_id), None)

    def check_credentials(self, username: str, password: str) -> bool:
        """Exact string comparison against the stored password."""
        return self.authenticate(username, password) is not None

    def authenticate(self, username: str, password: str) -> User | None:
        """Return the user whose username and password both match."""
        return next(
            (
                u
                for u in self._users
                if u.username == username and u.password == password
            ),
            None,
        )

    def get_applications_for_user(self, user_id: str) -> list[Application]:
        """Applications owned by user_id, in insertion order."""
        return [a for a in self._applications if a.user_id == user_id]

    # Mutations

    async def save_user(self, user: User) -> User:
        async with self.lock:
            self._users.append(user)
            try:
                await self._flush(users=True)
            except StorageError:
                self._users.remove(user)
                raise
        return user

    async def save_application(self, application: Application) -> Application:
        async with self.lock:
            if self.find_user_by_id(application.user_id) is None:
                raise ValueError(f"Unknown user {application.user_id}")
            self._applications.append(application)
            try:
                await self._flush(applications=True)
            except StorageError:
                self._applications.remove(application)
                raise
        return application

    async def save_registration(
        self, user: User, application: Application
    ) -> tuple[User, Application]:
        """Persist a new user and its first application in one write.

        The caller must hold ``lock`` so the uniqueness check that precedes
        this call and the insert happen as one step.
        """
        if application.user_id != user.id:
            raise ValueError("Application must belong to the registered user")
        self._users.append(user)
        self._applications.append(application)
        try:
            await self._flush(users=True, applications=True)
        except StorageError:
            self._users.remove(user)
            self._applications.remove(application)
            raise
        return user, application

    async def update_application_status(
        self, application_id: str, status: ApplicationStatus
    ) -> Application:
        """Set a new status and refresh updatedAt.

        Raises:
            ApplicationNotFoundError: no application has this id.
        """
        async with self.lock:
            index = next(
                (
                    i
                    for i, a in enumerate(self._applications)
                    if a.id == application_id
                ),
                None,
            )
            if index is None:
                raise ApplicationNotFoundError(application_id)

            previous = self._applications[index]
            updated = previous.model_copy(
                update={
                    "status": ApplicationStatus(status),
                    "updated_at": datetime.now(UTC),
                }
            )
            self._applications[index] = updated
            try:
                await self._flush(applications=True)
            except StorageError:
                self._applications[index] = previous
                raise

        logger.info(
            f"Application {application_id}: {previous.status} -> {updated.status}"
        )
        return updated
