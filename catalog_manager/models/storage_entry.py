"""Key-value storage database model."""

from datetime import datetime

from sqlalchemy import Column, String, Text, DateTime

from catalog_manager.models.database import Base


class StorageEntry(Base):
    """A named string slot in the durable key-value store.

    Each slot holds the JSON encoding of one whole collection.
    """

    __tablename__ = "storage_entries"

    key = Column(String, primary_key=True, index=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<StorageEntry(key='{self.key}', size={len(self.value or '')})>"
