"""Logical clocks: in-process counter and Redis INCR."""

from book_archive.infrastructure.cache.clock_redis import CLOCK_KEY, RedisClock
from book_archive.infrastructure.memory.clock import CounterClock


async def test_counter_clock_strictly_increases():
    clock = CounterClock()
    ticks = [await clock.now() for _ in range(5)]
    assert ticks == [1, 2, 3, 4, 5]


async def test_counter_clock_resumes_from_start():
    clock = CounterClock(start=41)
    assert await clock.now() == 42


async def test_redis_clock_shared_between_instances(fake_redis):
    first, second = RedisClock(fake_redis), RedisClock(fake_redis)
    assert await first.now() == 1
    assert await second.now() == 2
    assert fake_redis._store[CLOCK_KEY] == "2"
