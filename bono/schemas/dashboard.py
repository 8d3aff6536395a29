"""Schemas for dashboard and admin review views."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from bono.models.application import ApplicationStatus
from bono.schemas.auth import UserPublic


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApplicationCounts(_CamelModel):
    """Totals shown on the admin dashboard."""

    total: int = 0
    pending: int = 0
    approved: int = Field(default=0, description="approved or paid")


class StatusIndicator(_CamelModel):
    """One progress step with its display text and style."""

    text: str
    style_class: str


class StatusIndicators(_CamelModel):
    """Documents, approval and deposit progress of one application."""

    documents: StatusIndicator
    approval: StatusIndicator
    deposit: StatusIndicator


class ApplicationSummary(_CamelModel):
    """Display-ready view of the latest application."""

    id: str
    status: ApplicationStatus
    status_text: str
    status_class: str
    amount: int
    submitted_at: datetime
    updated_at: datetime | None = None
    documents_complete: bool
    notes: str = ""


class DashboardResponse(_CamelModel):
    """Everything the dashboard view needs for the current user."""

    user: UserPublic
    role_label: str
    application_count: int
    latest_application: ApplicationSummary | None = None
    indicators: StatusIndicators | None = None
    counts: ApplicationCounts | None = Field(
        default=None, description="Only present for administrators"
    )


class AdminApplicationRow(_CamelModel):
    """One row of the admin review list."""

    id: str
    user_id: str
    applicant_name: str
    applicant_cedula: str
    status: ApplicationStatus
    status_text: str
    status_class: str
    amount: int
    submitted_at: datetime
    actionable: bool = Field(..., description="Pending rows can be approved/rejected")


class AdminListResponse(_CamelModel):
    """Admin review list with totals."""

    counts: ApplicationCounts
    applications: list[AdminApplicationRow]
