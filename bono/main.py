"""Bono Navideño 5K - registration and benefits-tracking service."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bono.core.config import settings
from bono.core.storage import create_backend
from bono.routers import admin_router, auth_router, dashboard_router, register_router
from bono.services.record_store import RecordStore
from bono.services.session_store import SessionStore

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(f"Initializing storage ({settings.storage_backend})...")
    backend = create_backend(settings)
    await backend.init()

    record_store = RecordStore(backend, settings)
    await record_store.initialize()

    app.state.backend = backend
    app.state.record_store = record_store
    app.state.session_store = SessionStore(backend, settings.session_ttl_seconds)
    logger.info("Application initialized")

    yield

    logger.info("Shutting down...")
    await backend.close()
    logger.info("Shutdown complete")


app = FastAPI(
    title="Bono Navideño 5K",
    description="Registration and benefits tracking for the Bono Navideño 5K",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(register_router)
app.include_router(auth_router)
app.include_router(dashboard_router)
app.include_router(admin_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "bono",
        "storage": settings.storage_backend,
    }
