"""Status display mapping and dashboard aggregation."""

import logging
from collections.abc import Iterable

from bono.models.application import Application, ApplicationStatus
from bono.models.user import User
from bono.schemas.auth import UserPublic
from bono.schemas.dashboard import (
    AdminApplicationRow,
    AdminListResponse,
    ApplicationCounts,
    ApplicationSummary,
    DashboardResponse,
    StatusIndicator,
    StatusIndicators,
)
from bono.services.record_store import RecordStore

logger = logging.getLogger(__name__)

STATUS_TEXT = {
    ApplicationStatus.PENDING: "Pendiente",
    ApplicationStatus.UNDER_REVIEW: "En Revisión",
    ApplicationStatus.APPROVED: "Aprobada",
    ApplicationStatus.REJECTED: "Rechazada",
    ApplicationStatus.PAID: "Pagada",
}
UNKNOWN_STATUS_TEXT = "Desconocido"

STATUS_CLASS = {
    ApplicationStatus.PENDING: "bg-yellow-100 text-yellow-800",
    ApplicationStatus.UNDER_REVIEW: "bg-blue-100 text-blue-800",
    ApplicationStatus.APPROVED: "bg-green-100 text-green-800",
    ApplicationStatus.REJECTED: "bg-red-100 text-red-800",
    ApplicationStatus.PAID: "bg-purple-100 text-purple-800",
}
DEFAULT_STATUS_CLASS = "bg-gray-100 text-gray-800"

APPROVED_STATUSES = frozenset({ApplicationStatus.APPROVED, ApplicationStatus.PAID})

COMPLETED_TEXT = "Completado"
APPROVED_TEXT = "Aprobada"
PENDING_TEXT = "Pendiente"
DONE_CLASS = "text-green-600"
WAITING_CLASS = "text-yellow-600"

ROLE_LABELS = {"admin": "Administrador", "user": "Solicitante"}
UNKNOWN_APPLICANT_NAME = "Usuario desconocido"
UNKNOWN_APPLICANT_CEDULA = "N/A"


def status_text(status: str | None) -> str:
    """Human-readable status; unknown values map to 'Desconocido'."""
    return STATUS_TEXT.get(status, UNKNOWN_STATUS_TEXT)


def status_style_class(status: str | None) -> str:
    """Badge style for a status; unknown values get the neutral gray style."""
    return STATUS_CLASS.get(status, DEFAULT_STATUS_CLASS)


def aggregate_counts(applications: Iterable[Application]) -> ApplicationCounts:
    """Count all, pending, and approved-or-paid applications."""
    counts = ApplicationCounts()
    for app in applications:
        counts.total += 1
        if app.status == ApplicationStatus.PENDING:
            counts.pending += 1
        elif app.status in APPROVED_STATUSES:
            counts.approved += 1
    return counts


def documents_complete(application: Application) -> bool:
    return application.documents.cedula and application.documents.bank_statement


def _indicator(done: bool, done_text: str = COMPLETED_TEXT) -> StatusIndicator:
    """Step indicator; only "Completado" uses the green style."""
    if done:
        style = DONE_CLASS if done_text == COMPLETED_TEXT else WAITING_CLASS
        return StatusIndicator(text=done_text, style_class=style)
    return StatusIndicator(text=PENDING_TEXT, style_class=WAITING_CLASS)


def status_indicators(application: Application) -> StatusIndicators:
    """Progress of documents, approval and deposit for one application."""
    return StatusIndicators(
        documents=_indicator(documents_complete(application)),
        approval=_indicator(application.status in APPROVED_STATUSES, APPROVED_TEXT),
        deposit=_indicator(application.status == ApplicationStatus.PAID),
    )


def summarize_application(application: Application) -> ApplicationSummary:
    return ApplicationSummary(
        id=application.id,
        status=application.status,
        status_text=status_text(application.status),
        status_class=status_style_class(application.status),
        amount=application.amount,
        submitted_at=application.submitted_at,
        updated_at=application.updated_at,
        documents_complete=documents_complete(application),
        notes=application.notes,
    )


def build_dashboard(user: User, store: RecordStore) -> DashboardResponse:
    """Dashboard data for user: administrators see every application."""
    if user.is_admin:
        applications = store.list_applications()
    else:
        applications = store.get_applications_for_user(user.id)

    latest = applications[-1] if applications else None
    return DashboardResponse(
        user=UserPublic.from_user(user),
        role_label=ROLE_LABELS.get(user.role, ROLE_LABELS["user"]),
        application_count=len(applications),
        latest_application=summarize_application(latest) if latest else None,
        indicators=status_indicators(latest) if latest else None,
        counts=aggregate_counts(applications) if user.is_admin else None,
    )


def build_admin_list(store: RecordStore) -> AdminListResponse:
    """Review list of all applications with their applicant details."""
    applications = store.list_applications()
    rows = []
    for app in applications:
        owner = store.find_user_by_id(app.user_id)
        rows.append(
            AdminApplicationRow(
                id=app.id,
                user_id=app.user_id,
                applicant_name=owner.name if owner else UNKNOWN_APPLICANT_NAME,
                applicant_cedula=owner.cedula if owner else UNKNOWN_APPLICANT_CEDULA,
                status=app.status,
                status_text=status_text(app.status),
                status_class=status_style_class(app.status),
                amount=app.amount,
                submitted_at=app.submitted_at,
                actionable=app.status == ApplicationStatus.PENDING,
            )
        )
    return AdminListResponse(counts=aggregate_counts(applications), applications=rows)


async def approve_application(store: RecordStore, application_id: str) -> Application:
    application = await store.update_application_status(
        application_id, ApplicationStatus.APPROVED
    )
    logger.info(f"Application {application_id} approved")
    return application


async def reject_application(store: RecordStore, application_id: str) -> Application:
    application = await store.update_application_status(
        application_id, ApplicationStatus.REJECTED
    )
    logger.info(f"Application {application_id} rejected")
    return application
