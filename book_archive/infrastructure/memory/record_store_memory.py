"""In-memory record store. Process-local; used for tests and single-node deployments."""

import threading
from typing import Dict, Optional

from book_archive.domain.exceptions import AlreadyExistsInArchiveError
from book_archive.domain.fingerprint import Fingerprint
from book_archive.domain.models.record import BookRecord


class InMemoryRecordStore:
    """Implements RecordStore protocol. Insert is check-and-set under a lock, so it is atomic across threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: Dict[Fingerprint, BookRecord] = {}

    async def insert(self, fp: Fingerprint, record: BookRecord) -> None:
        with self._lock:
            if fp in self._records:
                raise AlreadyExistsInArchiveError(f"Book already exists in archive: {fp.hex}")
            self._records[fp] = record

    async def get(self, fp: Fingerprint) -> Optional[BookRecord]:
        with self._lock:
            return self._records.get(fp)

    async def exists(self, fp: Fingerprint) -> bool:
        with self._lock:
            return fp in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
