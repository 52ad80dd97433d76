# scripts/check_redis.py

import sys
from pathlib import Path

# Ensure project root is on the path when running this script directly
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import asyncio
import uuid
from book_archive.config.settings import get_settings
from book_archive.infrastructure.cache.redis_client import RedisClient


async def check():
    r = RedisClient(get_settings().redis_url)
    key = f"archive:check:{uuid.uuid4()}"

    result1 = await r.set_nx(key, "1")
    result2 = await r.set_nx(key, "2")

    print("First insert:", result1)
    print("Second insert:", result2)
    await r.client.delete(key)
    await r.close()

asyncio.run(check())
