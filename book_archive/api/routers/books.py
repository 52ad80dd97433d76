"""Books API router: POST /books (archive once), GET /books/{fingerprint}, GET /fingerprint."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from book_archive.api.dependencies import get_archive_service, get_correlation_id, get_credentials
from book_archive.application.archive_service import ArchiveService
from book_archive.domain.fingerprint import Fingerprint, fingerprint
from book_archive.domain.schemas.record import (
    ArchiveBookRequest,
    BookSummaryResponse,
    FingerprintResponse,
)

router = APIRouter()


@router.post("/books", response_model=FingerprintResponse, status_code=201)
async def archive_book(
    body: ArchiveBookRequest,
    credentials: Annotated[Optional[str], Depends(get_credentials)] = ...,
    correlation_id: Annotated[str, Depends(get_correlation_id)] = ...,
    archive_service: Annotated[ArchiveService, Depends(get_archive_service)] = ...,
):
    """Archive a book. 401 without valid credentials, 409 if the title/author pair is already archived."""
    fp = await archive_service.archive_book(
        credentials=credentials,
        title=body.title.encode("utf-8"),
        author=body.author.encode("utf-8"),
        content_ref=body.content_ref.encode("utf-8"),
        correlation_id=correlation_id,
    )
    return FingerprintResponse(fingerprint=fp.hex)


@router.get("/books/{fingerprint_hex}", response_model=BookSummaryResponse)
async def book_summary(
    fingerprint_hex: str,
    archive_service: Annotated[ArchiveService, Depends(get_archive_service)] = ...,
):
    """Get the archived record by fingerprint."""
    fp = Fingerprint.from_hex(fingerprint_hex)
    record = await archive_service.book_summary(fp)
    if record is None:
        return JSONResponse(status_code=404, content={"detail": "Book not found"})
    return BookSummaryResponse.from_record(fp, record)


@router.get("/fingerprint", response_model=FingerprintResponse)
async def compute_fingerprint(
    title: Annotated[str, Query()],
    author: Annotated[str, Query()],
):
    """Fingerprint of a title/author pair, for looking books up by name."""
    fp = fingerprint(title.encode("utf-8"), author.encode("utf-8"))
    return FingerprintResponse(fingerprint=fp.hex)
