"""DB-backed record store. Persists records to the archive_records table."""

import asyncio
from contextlib import nullcontext
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from book_archive.domain.exceptions import AlreadyExistsInArchiveError
from book_archive.domain.fingerprint import Fingerprint
from book_archive.domain.models.record import BookRecord
from book_archive.infrastructure.database.models import ArchiveRecord


def _to_domain(orm: ArchiveRecord) -> BookRecord:
    return BookRecord(
        title=bytes(orm.title),
        author=bytes(orm.author),
        content_ref=bytes(orm.content_ref),
        submitter=orm.submitter,
        created_at=int(orm.created_at),
    )


class DbRecordStore:
    """
    Implements RecordStore protocol on SQL. The fingerprint primary key makes insert
    atomic: a duplicate surfaces as IntegrityError and is mapped to AlreadyExistsInArchiveError.
    One session per operation. With serialize_transactions set (SQLite, where every session
    shares one connection) operations run one at a time so a rollback never spans another
    caller's pending insert.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        serialize_transactions: bool = False,
    ) -> None:
        self._session_factory = session_factory
        self._lock: Optional[asyncio.Lock] = asyncio.Lock() if serialize_transactions else None

    def _slot(self):
        return self._lock if self._lock is not None else nullcontext()

    async def insert(self, fp: Fingerprint, record: BookRecord) -> None:
        orm = ArchiveRecord(
            fingerprint=fp.digest,
            title=record.title,
            author=record.author,
            content_ref=record.content_ref,
            submitter=record.submitter,
            created_at=record.created_at,
        )
        async with self._slot(), self._session_factory() as session:
            session.add(orm)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise AlreadyExistsInArchiveError(
                    f"Book already exists in archive: {fp.hex}"
                ) from e

    async def get(self, fp: Fingerprint) -> Optional[BookRecord]:
        async with self._slot(), self._session_factory() as session:
            result = await session.execute(
                select(ArchiveRecord).where(ArchiveRecord.fingerprint == fp.digest)
            )
            orm = result.scalar_one_or_none()
            if orm is None:
                return None
            return _to_domain(orm)

    async def exists(self, fp: Fingerprint) -> bool:
        async with self._slot(), self._session_factory() as session:
            result = await session.execute(
                select(ArchiveRecord.fingerprint).where(ArchiveRecord.fingerprint == fp.digest)
            )
            return result.scalar_one_or_none() is not None

    async def latest_logical_time(self) -> int:
        """Highest created_at stored so far, or 0 for an empty archive. Used to seed the clock."""
        async with self._slot(), self._session_factory() as session:
            result = await session.execute(select(func.max(ArchiveRecord.created_at)))
            latest = result.scalar_one_or_none()
            return int(latest) if latest is not None else 0
