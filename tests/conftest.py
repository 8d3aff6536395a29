"""Pytest configuration and fixtures."""

import os

import pytest
import pytest_asyncio

# Set test environment variables before importing bono modules
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["COOKIE_SECURE"] = "false"
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture
def test_settings():
    """Settings isolated from any local .env file."""
    from bono.core.config import Settings

    return Settings(_env_file=None, storage_backend="memory", cookie_secure=False)


@pytest.fixture
def memory_backend():
    from bono.core.storage import MemoryBackend

    return MemoryBackend()


@pytest_asyncio.fixture
async def record_store(memory_backend, test_settings):
    """Initialized store holding only the seeded administrator."""
    from bono.services.record_store import RecordStore

    store = RecordStore(memory_backend, test_settings)
    await store.initialize()
    return store


@pytest.fixture
def registration_service(record_store, test_settings):
    from bono.services.registration_service import RegistrationService

    return RegistrationService(record_store, test_settings)


@pytest.fixture
def valid_form():
    """A registration form that passes every check."""
    from bono.schemas.registration import RegistrationRequest

    return RegistrationRequest(
        first_name="María",
        last_name="Pérez",
        cedula="001-1234567-8",
        email="maria.perez@example.com",
        phone="809-123-4567",
        password="Navidad2024",
        confirm_password="Navidad2024",
        terms_accepted=True,
    )


@pytest.fixture
def make_application():
    """Build an Application for a given owner and status."""
    from bono.models.application import Application, ApplicationStatus, Documents

    def _make(user_id="u1", status=ApplicationStatus.PENDING, **kwargs):
        return Application(
            user_id=user_id,
            status=status,
            amount=kwargs.pop("amount", 5000),
            documents=kwargs.pop("documents", Documents()),
            **kwargs,
        )

    return _make


@pytest.fixture
def test_client():
    """Client running the full application lifespan on a memory backend."""
    from fastapi.testclient import TestClient

    from bono.main import app

    with TestClient(app) as client:
        yield client
