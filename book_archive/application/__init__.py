# Application layer: the archive service and the collaborator protocols it depends on.

from book_archive.application.archive_service import ArchiveService
from book_archive.application.ports import EventSink, IdentityProvider, LogicalClock
from book_archive.application.record_store import RecordStore

__all__ = [
    "ArchiveService",
    "EventSink",
    "IdentityProvider",
    "LogicalClock",
    "RecordStore",
]
