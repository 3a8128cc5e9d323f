from formbuilder.db.base import Base, TimestampMixin, SoftDeleteMixin
from formbuilder.db.session import Database, get_db

__all__ = ["Base", "TimestampMixin", "SoftDeleteMixin", "Database", "get_db"]
