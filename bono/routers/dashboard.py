"""Dashboard endpoint for the logged-in user."""

from fastapi import APIRouter, Depends

from bono.models.user import User
from bono.schemas.dashboard import DashboardResponse
from bono.services.dependencies import get_current_user, get_record_store
from bono.services.record_store import RecordStore
from bono.services.status_service import build_dashboard

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def dashboard(
    user: User = Depends(get_current_user),
    store: RecordStore = Depends(get_record_store),
):
    """Status summary of the current user's applications."""
    return build_dashboard(user, store)
