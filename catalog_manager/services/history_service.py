"""Activity history service."""

import logging
from datetime import datetime

from pydantic import TypeAdapter

from catalog_manager.schemas.history import HistoryAction, HistoryEntry
from catalog_manager.services.storage_service import StorageService
from catalog_manager.utils.confirm import Confirm, always_confirm
from catalog_manager.utils.identifiers import Clock, MonotonicIdFactory, format_timestamp

logger = logging.getLogger(__name__)

HISTORY_ADAPTER = TypeAdapter(list[HistoryEntry])


def describe(name: str, sku: str = "") -> str:
    """Subject line for a product action."""
    return f"{name} ({sku})" if sku else name


class HistoryService:
    """Newest-first log of user actions.

    Every component records its actions through append().
    """

    def __init__(
        self,
        storage: StorageService,
        key: str,
        entries: list[HistoryEntry],
        clock: Clock = datetime.now,
    ):
        self.storage = storage
        self.key = key
        self._entries = list(entries)
        self.clock = clock
        self._next_id = MonotonicIdFactory(clock, (e.id for e in self._entries))

    def list(self) -> list[HistoryEntry]:
        """Get all entries, newest first."""
        return list(self._entries)

    def count(self) -> int:
        return len(self._entries)

    def persist(self) -> bool:
        return self.storage.save_collection(self.key, HISTORY_ADAPTER, self._entries)

    def append(
        self,
        action: HistoryAction | str,
        subject: str,
        sku: str = "",
    ) -> HistoryEntry:
        """Record an action at the top of the log."""
        label = action.value if isinstance(action, HistoryAction) else action
        entry = HistoryEntry(
            id=self._next_id(),
            action=label,
            subject=describe(subject, sku),
            timestamp=format_timestamp(self.clock()),
        )
        self._entries.insert(0, entry)
        self.persist()
        logger.info(f"History: {entry.action} {entry.subject}")
        return entry

    def clear(self, confirm: Confirm = always_confirm) -> bool:
        """Empty the log.

        An empty log is left alone without asking.
        """
        if not self._entries:
            return False

        if not confirm("Are you sure you want to clear the history? This action cannot be undone!"):
            return False

        count = len(self._entries)
        self._entries.clear()
        self.persist()
        logger.info(f"Cleared {count} history entries")
        return True
