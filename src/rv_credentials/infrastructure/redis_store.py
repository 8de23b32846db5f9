"""Redis-backed credential store — survives process restarts.

Key layout: "credential:{key}" -> secret string (no TTL).
"""

from collections.abc import Awaitable, Callable

import redis.asyncio as aioredis

from src.rv_common.redis_client import get_redis

_KEY_PREFIX = "credential:"


class RedisCredentialStore:
    def __init__(
        self, redis_factory: Callable[[], Awaitable[aioredis.Redis]] = get_redis
    ) -> None:
        self._redis_factory = redis_factory

    async def get(self, key: str) -> str | None:
        redis = await self._redis_factory()
        value = await redis.get(_KEY_PREFIX + key)
        return value if value is None else str(value)

    async def set(self, key: str, value: str) -> None:
        redis = await self._redis_factory()
        await redis.set(_KEY_PREFIX + key, value)

    async def delete(self, key: str) -> None:
        redis = await self._redis_factory()
        await redis.delete(_KEY_PREFIX + key)
