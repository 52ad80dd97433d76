# book_archive/infrastructure/database/models.py

from sqlalchemy import BigInteger, Column, DateTime, LargeBinary, String
from sqlalchemy.sql import func

from book_archive.infrastructure.database.session import Base


class ArchiveRecord(Base):
    """ORM model for archived books. One row per fingerprint; rows are never updated."""

    __tablename__ = "archive_records"

    fingerprint = Column(LargeBinary(32), primary_key=True)

    title = Column(LargeBinary, nullable=False)
    author = Column(LargeBinary, nullable=False)
    content_ref = Column(LargeBinary, nullable=False)
    submitter = Column(String, nullable=False, index=True)
    created_at = Column(BigInteger, nullable=False)

    inserted_at = Column(DateTime(timezone=True), server_default=func.now())
