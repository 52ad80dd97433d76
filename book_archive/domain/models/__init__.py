"""Domain models. Pure business entities."""

from book_archive.domain.models.record import BookArchived, BookRecord

__all__ = [
    "BookArchived",
    "BookRecord",
]
