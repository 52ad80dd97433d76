"""Domain models for archived books. Pure business semantics: no ORM or infrastructure."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class BookRecord:
    """
    Archived book. Immutable once created.
    title and author are stored in normalized (lower-cased) form; content_ref is verbatim.
    """

    title: bytes
    author: bytes
    content_ref: bytes
    submitter: str
    created_at: int  # logical time from the clock, not wall time

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "author": self.author,
            "content_ref": self.content_ref,
            "submitter": self.submitter,
            "created_at": self.created_at,
        }


@dataclass(frozen=True)
class BookArchived:
    """Notification emitted after a book is archived."""

    submitter: str
