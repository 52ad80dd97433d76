# book_archive/infrastructure/cache/redis_client.py

import redis.asyncio as redis


class RedisClient:
    def __init__(self, url: str):
        self.client = redis.from_url(
            url,
            decode_responses=True,
        )

    async def set_nx(self, key: str, value: str) -> bool:
        """Set key to value only if it does not exist, without expiry. Returns True if key was set."""
        return bool(await self.client.set(key, value, nx=True))

    async def get(self, key: str) -> str | None:
        """Get value for key. Returns None if key does not exist."""
        return await self.client.get(key)

    async def exists(self, key: str) -> bool:
        return bool(await self.client.exists(key))

    async def incr(self, key: str) -> int:
        """Increment key, return new value."""
        return await self.client.incr(key)

    async def close(self) -> None:
        await self.client.aclose()
