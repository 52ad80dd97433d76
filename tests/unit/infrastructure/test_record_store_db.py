"""DbRecordStore on in-memory SQLite (aiosqlite): primary-key uniqueness and lookups."""

import pytest

from book_archive.domain.exceptions import AlreadyExistsInArchiveError
from book_archive.domain.fingerprint import fingerprint
from book_archive.domain.models.record import BookRecord
from book_archive.infrastructure.database.record_store_db import DbRecordStore
from book_archive.infrastructure.database.session import (
    create_engine,
    create_session_factory,
    create_tables,
)


@pytest.fixture
async def store():
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    await create_tables(engine)
    yield DbRecordStore(create_session_factory(engine), serialize_transactions=True)
    await engine.dispose()


def _record(content_ref: bytes, created_at: int, submitter: str = "C1") -> BookRecord:
    return BookRecord(
        title=b"title",
        author=b"author",
        content_ref=content_ref,
        submitter=submitter,
        created_at=created_at,
    )


async def test_insert_then_get(store):
    fp = fingerprint(b"title", b"author")
    assert await store.get(fp) is None
    assert await store.exists(fp) is False

    await store.insert(fp, _record(b"ipfs://x", 5))

    assert await store.get(fp) == _record(b"ipfs://x", 5)
    assert await store.exists(fp) is True


async def test_duplicate_insert_raises_and_keeps_original(store):
    fp = fingerprint(b"title", b"author")
    await store.insert(fp, _record(b"ipfs://x", 5))

    with pytest.raises(AlreadyExistsInArchiveError):
        await store.insert(fp, _record(b"ipfs://y", 6, submitter="C2"))

    stored = await store.get(fp)
    assert stored.content_ref == b"ipfs://x"
    assert stored.submitter == "C1"


async def test_latest_logical_time(store):
    assert await store.latest_logical_time() == 0
    await store.insert(fingerprint(b"a", b"b"), _record(b"u", 3))
    await store.insert(fingerprint(b"c", b"d"), _record(b"u", 9))
    assert await store.latest_logical_time() == 9
