"""Registration endpoint."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from bono.core.exceptions import StorageError, storage_unavailable_exception
from bono.schemas.registration import RegistrationRequest, RegistrationResult
from bono.services.dependencies import get_registration_service
from bono.services.registration_service import RegistrationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/register", tags=["register"])


@router.post("", response_model=RegistrationResult, status_code=201)
async def register(
    form: RegistrationRequest,
    service: RegistrationService = Depends(get_registration_service),
):
    """Register a user and their first benefit application.

    Field errors come back together with status 422 so the form can show
    every message at once.
    """
    try:
        result = await service.register(form)
    except StorageError as e:
        logger.error(f"Registration could not be stored: {e}")
        raise storage_unavailable_exception()

    if not result.success:
        return JSONResponse(
            status_code=422,
            content=result.model_dump(mode="json", by_alias=True),
        )
    return result
