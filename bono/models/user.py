"""User record model."""

import uuid
from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _utc_now() -> datetime:
    return datetime.now(UTC)


def new_record_id() -> str:
    """Return a collision-free identifier for a new record."""
    return uuid.uuid4().hex


class UserRole(StrEnum):
    """Roles a user can hold."""

    ADMIN = "admin"
    USER = "user"


class User(BaseModel):
    """Registered user, persisted as part of the bonoUsers blob."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    id: str = Field(default_factory=new_record_id)
    username: str
    # Stored verbatim; see DESIGN.md on plaintext credentials.
    password: str
    role: UserRole = UserRole.USER
    name: str
    first_name: str | None = None
    last_name: str | None = None
    email: str
    cedula: str
    phone: str
    created_at: datetime = Field(default_factory=_utc_now)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def snapshot(self) -> dict:
        """Serialize to the camelCase JSON shape used in storage."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
