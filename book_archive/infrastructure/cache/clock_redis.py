"""Redis-backed logical clock shared by every process pointing at the same Redis."""

from book_archive.infrastructure.cache.redis_client import RedisClient

CLOCK_KEY = "archive:clock"


class RedisClock:
    """INCR on a single key. Strictly increasing across all processes."""

    def __init__(self, redis_client: RedisClient, key: str = CLOCK_KEY) -> None:
        self._redis = redis_client
        self._key = key

    async def now(self) -> int:
        return await self._redis.incr(self._key)
