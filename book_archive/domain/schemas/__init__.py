"""Domain schemas. Request/response and validation."""

from book_archive.domain.schemas.record import (
    ArchiveBookRequest,
    BookSummaryResponse,
    FingerprintResponse,
)

__all__ = [
    "ArchiveBookRequest",
    "BookSummaryResponse",
    "FingerprintResponse",
]
