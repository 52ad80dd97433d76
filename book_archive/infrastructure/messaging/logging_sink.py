"""Event sink that only logs. Used when no broker is wired."""

import logging

from book_archive.domain.models.record import BookArchived

logger = logging.getLogger(__name__)


class LoggingEventSink:
    """EventSink that writes each notification as a structured log line."""

    async def publish(self, event: BookArchived) -> None:
        logger.info(
            "book_archived_event",
            extra={
                "event_type": type(event).__name__,
                "submitter": event.submitter,
            },
        )
