"""Schemas for the registration form and its outcome."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from bono.models.application import Application
from bono.schemas.auth import UserPublic


class RegistrationRequest(BaseModel):
    """Raw registration form fields, untrimmed."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str = Field(default="", description="Given name")
    last_name: str = Field(default="", description="Family name")
    cedula: str = Field(default="", description="National ID, XXX-XXXXXXX-X")
    email: str = Field(default="", description="Email address")
    phone: str = Field(default="", description="Phone, 809/829/849-XXX-XXXX")
    password: str = Field(default="", description="Password")
    confirm_password: str = Field(default="", description="Password confirmation")
    terms_accepted: bool = Field(default=False, description="Terms accepted")

    @field_validator(
        "first_name",
        "last_name",
        "cedula",
        "email",
        "phone",
        "password",
        "confirm_password",
        mode="before",
    )
    @classmethod
    def _missing_text_as_empty(cls, value):
        """A null field is reported like an empty one."""
        return "" if value is None else value

    @field_validator("terms_accepted", mode="before")
    @classmethod
    def _missing_terms_as_declined(cls, value):
        return False if value is None else value


class FieldError(BaseModel):
    """A single problem with one form field."""

    field: str = Field(..., description="Form field id, e.g. cedula or terms")
    message: str


class RegistrationResult(BaseModel):
    """Either the created records or every field error found."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool
    user: UserPublic | None = None
    application: Application | None = None
    errors: list[FieldError] = Field(default_factory=list)

    def errors_for(self, field: str) -> list[str]:
        return [e.message for e in self.errors if e.field == field]
