"""Admin review endpoints."""

import logging

from fastapi import APIRouter, Depends

from bono.core.exceptions import (
    ApplicationNotFoundError,
    StorageError,
    not_found_exception,
    storage_unavailable_exception,
)
from bono.models.user import User
from bono.schemas.dashboard import AdminApplicationRow, AdminListResponse
from bono.services.dependencies import get_record_store, require_admin
from bono.services.record_store import RecordStore
from bono.services.status_service import (
    approve_application,
    build_admin_list,
    reject_application,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


def _row(store: RecordStore, application_id: str) -> AdminApplicationRow:
    listing = build_admin_list(store)
    return next(r for r in listing.applications if r.id == application_id)


@router.get("/applications", response_model=AdminListResponse)
async def list_applications(
    admin: User = Depends(require_admin),
    store: RecordStore = Depends(get_record_store),
):
    """All applications with applicant details and totals."""
    return build_admin_list(store)


@router.post("/applications/{application_id}/approve", response_model=AdminApplicationRow)
async def approve(
    application_id: str,
    admin: User = Depends(require_admin),
    store: RecordStore = Depends(get_record_store),
):
    """Mark an application approved."""
    try:
        await approve_application(store, application_id)
    except ApplicationNotFoundError as e:
        logger.warning(e.message)
        raise not_found_exception(e.message)
    except StorageError as e:
        logger.error(f"Could not approve {application_id}: {e}")
        raise storage_unavailable_exception()
    return _row(store, application_id)


@router.post("/applications/{application_id}/reject", response_model=AdminApplicationRow)
async def reject(
    application_id: str,
    admin: User = Depends(require_admin),
    store: RecordStore = Depends(get_record_store),
):
    """Mark an application rejected."""
    try:
        await reject_application(store, application_id)
    except ApplicationNotFoundError as e:
        logger.warning(e.message)
        raise not_found_exception(e.message)
    except StorageError as e:
        logger.error(f"Could not reject {application_id}: {e}")
        raise storage_unavailable_exception()
    return _row(store, application_id)
