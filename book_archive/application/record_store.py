"""Record store protocol. Application layer depends on this; infrastructure implements it."""

from typing import Optional, Protocol

from book_archive.domain.fingerprint import Fingerprint
from book_archive.domain.models.record import BookRecord


class RecordStore(Protocol):
    """Append-only mapping from fingerprint to record. No update, no delete."""

    async def insert(self, fp: Fingerprint, record: BookRecord) -> None:
        """
        Atomically associate fp -> record if fp is absent.
        Raises AlreadyExistsInArchiveError if fp is already present.
        """
        ...

    async def get(self, fp: Fingerprint) -> Optional[BookRecord]:
        """Return the stored record, or None if absent."""
        ...

    async def exists(self, fp: Fingerprint) -> bool:
        """True if a record is stored under fp."""
        ...
