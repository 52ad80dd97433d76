"""Pydantic schemas for the archive API. Strict validation, no DB or infrastructure."""

from pydantic import BaseModel, Field

from book_archive.domain.fingerprint import Fingerprint
from book_archive.domain.models.record import BookRecord


def _decode(value: bytes) -> str:
    return value.decode("utf-8", errors="backslashreplace")


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class ArchiveBookRequest(BaseModel):
    """Request schema for archiving a book. Text fields are carried as UTF-8."""

    title: str = Field(..., description="Book title; case-normalized before fingerprinting")
    author: str = Field(..., description="Book author; case-normalized before fingerprinting")
    content_ref: str = Field(..., description="Opaque pointer to externally stored content")

    model_config = {"extra": "forbid"}


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class FingerprintResponse(BaseModel):
    """Fingerprint of a (title, author) pair, hex-encoded."""

    fingerprint: str


class BookSummaryResponse(BaseModel):
    """Response schema for a stored book record."""

    fingerprint: str
    title: str
    author: str
    content_ref: str
    submitter: str
    created_at: int

    @classmethod
    def from_record(cls, fp: Fingerprint, record: BookRecord) -> "BookSummaryResponse":
        return cls(
            fingerprint=fp.hex,
            title=_decode(record.title),
            author=_decode(record.author),
            content_ref=_decode(record.content_ref),
            submitter=record.submitter,
            created_at=record.created_at,
        )
