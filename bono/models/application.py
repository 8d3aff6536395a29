"""Benefit application record model."""

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from bono.models.user import new_record_id


def _utc_now() -> datetime:
    return datetime.now(UTC)


class ApplicationStatus(StrEnum):
    """Review states of a benefit application."""

    PENDING = "pending"
    UNDER_REVIEW = "under_review"
    APPROVED = "approved"
    REJECTED = "rejected"
    PAID = "paid"


class Documents(BaseModel):
    """Supporting documents received for an application."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    cedula: bool = False
    bank_statement: bool = False


class Application(BaseModel):
    """Benefit application, persisted as part of the bonoApplications blob."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    id: str = Field(default_factory=new_record_id)
    user_id: str
    status: ApplicationStatus = ApplicationStatus.PENDING
    amount: int
    submitted_at: datetime = Field(default_factory=_utc_now)
    updated_at: datetime | None = None
    documents: Documents = Field(default_factory=Documents)
    notes: str = ""

    def snapshot(self) -> dict:
        """Serialize to the camelCase JSON shape used in storage."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
