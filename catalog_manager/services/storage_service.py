"""Key-value storage service mirroring collections to the database."""

import logging
from typing import Callable, TypeVar

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from catalog_manager.exceptions import StorageParseError
from catalog_manager.models.storage_entry import StorageEntry

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StorageService:
    """Durable string slots, one per collection.

    Writes are last-writer-wins and independent per key.
    """

    def __init__(self, session_factory: sessionmaker):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def load(self, key: str) -> str | None:
        """Get the stored text for a key, or None if the slot is empty."""
        db: Session = self.session_factory()
        try:
            entry = db.get(StorageEntry, key)
            return entry.value if entry else None
        finally:
            db.close()

    def save(self, key: str, text: str) -> bool:
        """Store text under a key, replacing any previous value.

        Returns False if the write failed. Failures are logged, not raised.
        """
        db: Session = self.session_factory()
        try:
            entry = db.get(StorageEntry, key)
            if entry is None:
                db.add(StorageEntry(key=key, value=text))
            else:
                entry.value = text
            db.commit()
            return True
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to save '{key}': {e}")
            return False
        finally:
            db.close()

    def parse(self, key: str, text: str, adapter: TypeAdapter[list[T]]) -> list[T]:
        """Decode a stored blob.

        Raises:
            StorageParseError: If the blob is not valid JSON for the adapter
        """
        try:
            return adapter.validate_json(text)
        except (ValidationError, ValueError) as e:
            raise StorageParseError(key, str(e)) from e

    def load_collection(
        self,
        key: str,
        adapter: TypeAdapter[list[T]],
        default_factory: Callable[[], list[T]],
    ) -> list[T]:
        """Load a collection, falling back to its default seed.

        An empty or unparsable slot never aborts start-up.
        """
        text = self.load(key)
        if text is None:
            logger.info(f"No stored value for '{key}', using defaults")
            return default_factory()

        try:
            items = self.parse(key, text, adapter)
        except StorageParseError as e:
            logger.warning(f"{e.message}; using defaults")
            return default_factory()

        logger.info(f"Loaded {len(items)} items from '{key}'")
        return items

    def save_collection(
        self,
        key: str,
        adapter: TypeAdapter[list[T]],
        items: list[T],
    ) -> bool:
        """Write the full collection under its key."""
        text = adapter.dump_json(items, by_alias=True).decode("utf-8")
        return self.save(key, text)
