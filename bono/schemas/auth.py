"""Schemas for login and user snapshots."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from bono.models.user import User, UserRole


class LoginRequest(BaseModel):
    """Login credentials."""

    username: str
    password: str


class UserPublic(BaseModel):
    """User snapshot without the stored password."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    username: str
    role: UserRole
    name: str
    first_name: str | None = None
    last_name: str | None = None
    email: str
    cedula: str
    phone: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserPublic":
        return cls.model_validate(user.model_dump(exclude={"password"}))
