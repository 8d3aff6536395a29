"""Core application components."""

from bono.core.config import settings
from bono.core.exceptions import (
    ApplicationNotFoundError,
    AuthenticationError,
    BonoError,
    StorageError,
)
from bono.core.storage import KeyValueBackend, MemoryBackend, create_backend

__all__ = [
    "ApplicationNotFoundError",
    "AuthenticationError",
    "BonoError",
    "KeyValueBackend",
    "MemoryBackend",
    "StorageError",
    "create_backend",
    "settings",
]
