"""InMemoryRecordStore: insert-if-absent, lookup, exists."""

import pytest

from book_archive.domain.exceptions import AlreadyExistsInArchiveError
from book_archive.domain.fingerprint import fingerprint
from book_archive.domain.models.record import BookRecord
from book_archive.infrastructure.memory.record_store_memory import InMemoryRecordStore


def _record(content_ref: bytes = b"ipfs://x", created_at: int = 1) -> BookRecord:
    return BookRecord(
        title=b"title",
        author=b"author",
        content_ref=content_ref,
        submitter="C1",
        created_at=created_at,
    )


@pytest.fixture
def store():
    return InMemoryRecordStore()


async def test_insert_then_get(store):
    fp = fingerprint(b"title", b"author")
    assert await store.get(fp) is None
    assert await store.exists(fp) is False

    await store.insert(fp, _record())

    assert await store.get(fp) == _record()
    assert await store.exists(fp) is True
    assert len(store) == 1


async def test_insert_existing_fingerprint_raises_and_keeps_original(store):
    fp = fingerprint(b"title", b"author")
    await store.insert(fp, _record())

    with pytest.raises(AlreadyExistsInArchiveError):
        await store.insert(fp, _record(content_ref=b"ipfs://y", created_at=2))

    assert (await store.get(fp)).content_ref == b"ipfs://x"
    assert len(store) == 1


async def test_independent_stores_do_not_share_state():
    fp = fingerprint(b"title", b"author")
    first, second = InMemoryRecordStore(), InMemoryRecordStore()
    await first.insert(fp, _record())
    assert await second.get(fp) is None
