from datetime import datetime, timezone

from sqlalchemy import Column, DateTime
from sqlalchemy.orm import declarative_base

# Define the Base class for ORM models to inherit from
Base = declarative_base()


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    """Shared created/updated columns for entities that track them"""
    created_at = Column(DateTime(timezone=True), default=_utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utc_now, onupdate=_utc_now, nullable=False)


class SoftDeleteMixin:
    """Tombstone column; rows with a deleted_at are hidden from reads"""
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)
