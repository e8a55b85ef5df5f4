"""ORM model for one named, JSON-encoded record (catalog snapshot, session or theme)."""

from sqlalchemy import Column, DateTime, String, Text, func

from commodities.models.base import Base


class StoredRecord(Base):
    """
    Key/value row backing the SQL persistence adapter.

    value holds the raw JSON text exactly as written; decoding is the caller's concern.
    """

    __tablename__ = "stored_records"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
