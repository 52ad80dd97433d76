"""Domain layer: fingerprinting, models, schemas, exceptions. Pure business logic only."""

from book_archive.domain.exceptions import (
    AlreadyExistsInArchiveError,
    ArchiveError,
    InvalidFingerprintError,
    UnauthenticatedError,
)
from book_archive.domain.fingerprint import Fingerprint, fingerprint, normalize, preimage
from book_archive.domain.models import BookArchived, BookRecord
from book_archive.domain.schemas import (
    ArchiveBookRequest,
    BookSummaryResponse,
    FingerprintResponse,
)

__all__ = [
    "AlreadyExistsInArchiveError",
    "ArchiveBookRequest",
    "ArchiveError",
    "BookArchived",
    "BookRecord",
    "BookSummaryResponse",
    "Fingerprint",
    "FingerprintResponse",
    "InvalidFingerprintError",
    "UnauthenticatedError",
    "fingerprint",
    "normalize",
    "preimage",
]
