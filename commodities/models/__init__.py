"""SQLAlchemy ORM models."""

from commodities.models.base import Base
from commodities.models.record import StoredRecord

__all__ = ["Base", "StoredRecord"]
