"""Key-value storage backends for persisted collections and sessions."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from bono.core.exceptions import StorageError

if TYPE_CHECKING:
    from bono.core.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class KeyValueBackend(ABC):
    """Abstract string-to-string store with optional expiry."""

    name: str = "abstract"

    async def init(self) -> None:
        """Prepare the backend (create tables, open connections)."""

    async def close(self) -> None:
        """Release backend resources."""

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the value stored under key, or None when absent/expired."""
        pass

    @abstractmethod
    async def set(self, key: str, value: str, ttl_seconds: int | None = None) -> None:
        """Store value under key, optionally expiring after ttl_seconds."""
        pass

    @abstractmethod
    async def set_many(self, items: dict[str, str]) -> None:
        """Store several keys in one atomic write."""
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove key if present."""
        pass


class MemoryBackend(KeyValueBackend):
    """Process-local backend, used for tests and throwaway runs."""

    name = "memory"

    def __init__(self) -> None:
        self._data: dict[str, tuple[str, float | None]] = {}

    async def get(self, key: str) -> str | None:
        entry = self._data.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at is not None and time.monotonic() >= expires_at:
            del self._data[key]
            return None
        return value

    async def set(self, key: str, value: str, ttl_seconds: int | None = None) -> None:
        expires_at = time.monotonic() + ttl_seconds if ttl_seconds else None
        self._data[key] = (value, expires_at)

    async def set_many(self, items: dict[str, str]) -> None:
        for key, value in items.items():
            self._data[key] = (value, None)

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)


def _utc_now() -> datetime:
    """Return current UTC time as timezone-naive datetime for DB storage."""
    return datetime.now(UTC).replace(tzinfo=None)


class SQLBackend(KeyValueBackend):
    """Backend storing each key as a row of the kv_entries table."""

    name = "sql"

    def __init__(self, database_url: str):
        self.engine: AsyncEngine = create_async_engine(
            database_url,
            echo=False,
            pool_pre_ping=True,
        )
        self.async_session = sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def init(self) -> None:
        """Create the kv_entries table if missing."""
        import bono.models.kv_entry  # noqa: F401

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            raise StorageError("kv_entries", str(e)) from e

    async def close(self) -> None:
        await self.engine.dispose()

    async def get(self, key: str) -> str | None:
        from bono.models.kv_entry import KeyValueEntry

        try:
            async with self.async_session() as session:
                result = await session.execute(
                    select(KeyValueEntry).where(KeyValueEntry.key == key)
                )
                entry = result.scalar_one_or_none()
                if entry is None:
                    return None
                if entry.expires_at is not None and entry.expires_at <= _utc_now():
                    await session.delete(entry)
                    await session.commit()
                    return None
                return entry.value
        except SQLAlchemyError as e:
            raise StorageError(key, str(e)) from e

    async def set(self, key: str, value: str, ttl_seconds: int | None = None) -> None:
        from bono.models.kv_entry import KeyValueEntry

        expires_at = (
            _utc_now() + timedelta(seconds=ttl_seconds) if ttl_seconds else None
        )
        try:
            async with self.async_session() as session:
                await session.merge(
                    KeyValueEntry(key=key, value=value, expires_at=expires_at)
                )
                await session.commit()
        except SQLAlchemyError as e:
            raise StorageError(key, str(e)) from e

    async def set_many(self, items: dict[str, str]) -> None:
        from bono.models.kv_entry import KeyValueEntry

        try:
            async with self.async_session() as session:
                for key, value in items.items():
                    await session.merge(KeyValueEntry(key=key, value=value))
                await session.commit()
        except SQLAlchemyError as e:
            raise StorageError(",".join(items), str(e)) from e

    async def delete(self, key: str) -> None:
        from bono.models.kv_entry import KeyValueEntry

        try:
            async with self.async_session() as session:
                await session.execute(
                    delete(KeyValueEntry).where(KeyValueEntry.key == key)
                )
                await session.commit()
        except SQLAlchemyError as e:
            raise StorageError(key, str(e)) from e


def create_backend(config: Settings) -> KeyValueBackend:
    """Build the backend selected by settings.storage_backend."""
    if config.storage_backend == "memory":
        return MemoryBackend()
    if config.storage_backend == "sql":
        return SQLBackend(config.database_url)
    if config.storage_backend == "redis":
        from bono.core.redis_client import RedisBackend

        return RedisBackend(config.redis_url)
    raise ValueError(f"Unknown storage backend: {config.storage_backend}")
