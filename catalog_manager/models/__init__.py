"""Database models."""

from catalog_manager.models.database import Base, engine, SessionLocal
from catalog_manager.models.storage_entry import StorageEntry

__all__ = ["Base", "engine", "SessionLocal", "StorageEntry"]
