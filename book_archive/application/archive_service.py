"""Archive application service: transaction boundary. Orchestrates authenticate, guard, insert, notify."""

import logging
from typing import Optional

from book_archive.application.ports import EventSink, IdentityProvider, LogicalClock
from book_archive.application.record_store import RecordStore
from book_archive.core.context import caller_ctx
from book_archive.domain.exceptions import AlreadyExistsInArchiveError, UnauthenticatedError
from book_archive.domain.fingerprint import Fingerprint, fingerprint, normalize
from book_archive.domain.models.record import BookArchived, BookRecord
from book_archive.observability.metrics import MetricsCollector

ARCHIVE_BOOK_TOTAL = "archive_book_total"
EVENT_SINK_FAILURES_TOTAL = "event_sink_failures_total"


class ArchiveService:
    """
    Application-layer orchestration only. No HTTP, no FastAPI, no direct infrastructure.
    Transaction strategy: the store insert is the commit point. Every rejection happens
    before it, so a failed call changes nothing and emits nothing. Event delivery after
    the commit is best-effort (log and return success).
    """

    def __init__(
        self,
        store: RecordStore,
        identity_provider: IdentityProvider,
        clock: LogicalClock,
        event_sink: EventSink,
        logger: logging.Logger,
        metrics: Optional[MetricsCollector] = None,
    ) -> None:
        self._store = store
        self._identity = identity_provider
        self._clock = clock
        self._event_sink = event_sink
        self._logger = logger
        self._metrics = metrics or MetricsCollector()

    async def archive_book(
        self,
        credentials: Optional[str],
        title: bytes,
        author: bytes,
        content_ref: bytes,
        correlation_id: str = "",
    ) -> Fingerprint:
        """
        Single mutating entry point. Archives the book exactly once per normalized
        (title, author) and returns its fingerprint.
        Raises UnauthenticatedError or AlreadyExistsInArchiveError; the store is untouched on both.
        """
        # Step 1: Authenticate before any state access
        try:
            caller = self._identity.authenticate(credentials)
        except UnauthenticatedError:
            self._metrics.increment(ARCHIVE_BOOK_TOTAL, outcome="unauthenticated")
            self._logger.warning(
                "archive_unauthenticated",
                extra={"correlation_id": correlation_id},
            )
            raise
        token = caller_ctx.set(caller)
        try:
            return await self._archive_as(caller, title, author, content_ref, correlation_id)
        finally:
            caller_ctx.reset(token)

    async def _archive_as(
        self,
        caller: str,
        title: bytes,
        author: bytes,
        content_ref: bytes,
        correlation_id: str,
    ) -> Fingerprint:
        # Step 2: Derive fingerprint
        fp = fingerprint(title, author)

        # Step 3: Uniqueness guard
        if await self._store.exists(fp):
            self._reject_duplicate(fp, caller, correlation_id)

        # Step 4: Stamp logical time and insert (atomic insert-if-absent)
        record = BookRecord(
            title=normalize(title),
            author=normalize(author),
            content_ref=bytes(content_ref),
            submitter=caller,
            created_at=await self._clock.now(),
        )
        try:
            await self._store.insert(fp, record)
        except AlreadyExistsInArchiveError:
            # Lost a race with a concurrent insert of the same fingerprint
            self._reject_duplicate(fp, caller, correlation_id)
        self._metrics.increment(ARCHIVE_BOOK_TOTAL, outcome="archived")
        self._logger.info(
            "book_archived",
            extra={
                "fingerprint": fp.hex,
                "submitter": caller,
                "created_at": record.created_at,
                "correlation_id": correlation_id,
            },
        )

        # Step 5: Notify; delivery failure does NOT undo the insert
        try:
            await self._event_sink.publish(BookArchived(submitter=caller))
        except Exception as e:
            self._metrics.increment(EVENT_SINK_FAILURES_TOTAL)
            self._logger.error(
                "event_publish_failed",
                extra={
                    "fingerprint": fp.hex,
                    "submitter": caller,
                    "correlation_id": correlation_id,
                    "error": str(e),
                },
            )

        return fp

    async def book_summary(self, fp: Fingerprint) -> Optional[BookRecord]:
        """Sole read entry point. Returns the stored record or None."""
        return await self._store.get(fp)

    def _reject_duplicate(self, fp: Fingerprint, caller: str, correlation_id: str) -> None:
        self._metrics.increment(ARCHIVE_BOOK_TOTAL, outcome="already_exists")
        self._logger.info(
            "archive_rejected_duplicate",
            extra={
                "fingerprint": fp.hex,
                "submitter": caller,
                "correlation_id": correlation_id,
            },
        )
        raise AlreadyExistsInArchiveError(f"Book already exists in archive: {fp.hex}")
