"""
Redis adapter - per-key mutation locks.

A rating mutation reads the (user, content) record, checks it and writes it
back. Holding a Redis lock for that key around the whole sequence makes it
atomic across every API worker, not only across the tasks of one process.
Different keys never wait on each other.

Key layout:
    lock:rating:{user_id}:{content_id}

The lock is redis-py's token lock: SET NX PX to acquire, a token-checked
delete to release, and a TTL so a crashed worker cannot wedge a key.
"""

import functools
from typing import Optional

import redis.asyncio as redis
from redis.asyncio.lock import Lock
from redis.exceptions import RedisError

from scorecard.config.settings import settings
from scorecard.shared.core.logging import get_logger

logger = get_logger("scorecard.adapters.redis")


class RedisAdapter:
    """Adapter for the Redis instance shared by all workers."""

    def __init__(self, url: Optional[str] = None, client: Optional[redis.Redis] = None):
        """
        Args:
            url: Redis URL (redis://host:port/db); defaults to REDIS_URL
            client: Ready client to use instead of connecting to url
        """
        self.url = url or settings.REDIS_URL
        self._client = client

    @property
    def client(self) -> redis.Redis:
        """Lazy-loaded Redis client."""
        if self._client is None:
            self._client = redis.from_url(self.url, decode_responses=True)
        return self._client

    def lock(self, key: str) -> Lock:
        """
        Lock for one key, used as `async with adapter.lock(key):`.

        Waits until the key is free; the hold expires after
        RATING_LOCK_TTL_SECONDS.
        """
        return self.client.lock(
            f"lock:{key}",
            timeout=settings.RATING_LOCK_TTL_SECONDS,
            sleep=settings.RATING_LOCK_POLL_INTERVAL,
        )

    async def ping(self) -> bool:
        try:
            return bool(await self.client.ping())
        except RedisError as e:
            logger.warning("Redis ping failed", error=str(e))
            return False

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None


@functools.lru_cache(maxsize=1)
def get_redis_adapter() -> RedisAdapter:
    """Get or create the process-wide Redis adapter."""
    return RedisAdapter()


async def close_redis() -> None:
    """Close the process-wide adapter's connections on shutdown."""
    await get_redis_adapter().close()
