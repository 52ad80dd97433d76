"""
Chaos: failures at each step of archive_book.
System must: leave every lookup unchanged and emit nothing when the call fails.
"""

import logging
from unittest.mock import AsyncMock

import pytest

from book_archive.application.archive_service import ArchiveService
from book_archive.domain.exceptions import AlreadyExistsInArchiveError, UnauthenticatedError
from book_archive.domain.fingerprint import fingerprint
from book_archive.infrastructure.memory.clock import CounterClock
from book_archive.infrastructure.memory.record_store_memory import InMemoryRecordStore


class FailingClock:
    async def now(self) -> int:
        raise RuntimeError("clock unavailable")


@pytest.fixture
def sink():
    s = AsyncMock()
    s.publish = AsyncMock(return_value=None)
    return s


async def _snapshot(service, pairs):
    return {pair: await service.book_summary(fingerprint(*pair)) for pair in pairs}


async def test_failed_calls_leave_store_unchanged(identity_provider, sink):
    store = InMemoryRecordStore()
    service = ArchiveService(
        store=store,
        identity_provider=identity_provider,
        clock=CounterClock(),
        event_sink=sink,
        logger=logging.getLogger(__name__),
    )
    await service.archive_book("C1", b"Title", b"Author", b"ipfs://x")
    sink.publish.reset_mock()
    pairs = [(b"title", b"author"), (b"other", b"book")]
    before = await _snapshot(service, pairs)

    with pytest.raises(UnauthenticatedError):
        await service.archive_book(None, b"Other", b"Book", b"ipfs://z")
    with pytest.raises(AlreadyExistsInArchiveError):
        await service.archive_book("C2", b"TITLE", b"AUTHOR", b"ipfs://y")

    assert await _snapshot(service, pairs) == before
    assert len(store) == 1
    sink.publish.assert_not_awaited()


async def test_clock_failure_writes_nothing(identity_provider, sink):
    store = InMemoryRecordStore()
    service = ArchiveService(
        store=store,
        identity_provider=identity_provider,
        clock=FailingClock(),
        event_sink=sink,
        logger=logging.getLogger(__name__),
    )

    with pytest.raises(RuntimeError):
        await service.archive_book("C1", b"t", b"a", b"u")

    assert len(store) == 0
    sink.publish.assert_not_awaited()
