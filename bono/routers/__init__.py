"""API routers."""

from bono.routers.admin import router as admin_router
from bono.routers.auth import router as auth_router
from bono.routers.dashboard import router as dashboard_router
from bono.routers.register import router as register_router

__all__ = ["admin_router", "auth_router", "dashboard_router", "register_router"]
