"""Redis key-value backend."""

import logging

from redis.asyncio import Redis
from redis.exceptions import RedisError

from bono.core.exceptions import StorageError
from bono.core.storage import KeyValueBackend

logger = logging.getLogger(__name__)


class RedisBackend(KeyValueBackend):
    """Backend keeping every key as a plain Redis string."""

    name = "redis"

    def __init__(self, redis_url: str):
        self.redis_url = redis_url
        self._client: Redis | None = None

    @property
    def client(self) -> Redis:
        """Get or create the async Redis client."""
        if self._client is None:
            self._client = Redis.from_url(self.redis_url, decode_responses=True)
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None

    async def get(self, key: str) -> str | None:
        try:
            return await self.client.get(key)
        except RedisError as e:
            raise StorageError(key, str(e)) from e

    async def set(self, key: str, value: str, ttl_seconds: int | None = None) -> None:
        try:
            if ttl_seconds:
                await self.client.setex(key, ttl_seconds, value)
            else:
                await self.client.set(key, value)
        except RedisError as e:
            raise StorageError(key, str(e)) from e
        logger.debug(f"Stored key {key} (TTL: {ttl_seconds})")

    async def set_many(self, items: dict[str, str]) -> None:
        try:
            await self.client.mset(items)
        except RedisError as e:
            raise StorageError(",".join(items), str(e)) from e

    async def delete(self, key: str) -> None:
        try:
            await self.client.delete(key)
        except RedisError as e:
            raise StorageError(key, str(e)) from e
