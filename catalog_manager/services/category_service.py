"""Category registry service."""

import logging

from pydantic import TypeAdapter

from catalog_manager.exceptions import EmptyCollectionError, FileFormatError
from catalog_manager.schemas.category import CategoryImportMode, CategoryImportResult
from catalog_manager.schemas.history import HistoryAction
from catalog_manager.services.export_service import encode_categories_text
from catalog_manager.services.history_service import HistoryService
from catalog_manager.services.storage_service import StorageService
from catalog_manager.utils.confirm import Confirm, always_confirm

logger = logging.getLogger(__name__)

CATEGORY_ADAPTER = TypeAdapter(list[str])

# Lines starting with this are ignored on import
COMMENT_PREFIX = "#"
IMPORT_EXTENSION = ".txt"
BYTE_ORDER_MARK = "\ufeff"


def trim(value: str) -> str:
    """Strip surrounding whitespace and byte-order marks."""
    # str.strip() keeps U+FEFF
    return value.strip().strip(BYTE_ORDER_MARK).strip()


def parse_import_text(text: str) -> list[str]:
    """Get the category lines of an import file.

    Lines are trimmed; blank lines and comments are dropped. Duplicates are kept.
    """
    lines = (trim(line) for line in text.split("\n"))
    return [line for line in lines if line and not line.startswith(COMMENT_PREFIX)]


def check_import_filename(filename: str) -> None:
    """Reject files that are not plain text.

    Raises:
        FileFormatError: If the name does not end in .txt
    """
    if not filename.endswith(IMPORT_EXTENSION):
        raise FileFormatError(f"Please select a {IMPORT_EXTENSION} file")


class CategoryService:
    """Service for the sorted, deduplicated set of category paths."""

    def __init__(
        self,
        storage: StorageService,
        key: str,
        categories: list[str],
        history: HistoryService,
    ):
        self.storage = storage
        self.key = key
        self.history = history
        self._categories = sorted(set(categories))

    def list(self) -> list[str]:
        """Get all categories, sorted."""
        return list(self._categories)

    def count(self) -> int:
        return len(self._categories)

    def __contains__(self, path: str) -> bool:
        return path in self._categories

    def persist(self) -> bool:
        return self.storage.save_collection(self.key, CATEGORY_ADAPTER, self._categories)

    def add(self, path: str) -> bool:
        """Register a category path.

        Returns False if the trimmed path is empty or already known.
        """
        path = trim(path or "")
        if not path or path in self._categories:
            return False

        self._categories = sorted([*self._categories, path])
        self.persist()
        logger.info(f"Registered category '{path}'")
        return True

    def import_from_text(
        self,
        text: str,
        mode: CategoryImportMode,
        source_name: str = "import",
    ) -> CategoryImportResult:
        """Import category paths, one per line.

        Raises:
            FileFormatError: If no valid lines remain after filtering
        """
        imported = parse_import_text(text)
        if not imported:
            raise FileFormatError("No valid categories found in the file")

        if mode == CategoryImportMode.REPLACE:
            self._categories = sorted(set(imported))
            action = HistoryAction.IMPORTED_CATEGORIES_REPLACE
        else:
            self._categories = sorted(set(self._categories) | set(imported))
            action = HistoryAction.IMPORTED_CATEGORIES_ADD

        self.persist()
        self.history.append(action, f"{len(imported)} categories from {source_name}")
        logger.info(
            f"Imported {len(imported)} categories from {source_name} "
            f"({mode.value}), {len(self._categories)} total"
        )

        return CategoryImportResult(
            mode=mode,
            found=len(imported),
            total=len(self._categories),
        )

    def import_file(
        self,
        filename: str,
        content: str,
        mode: CategoryImportMode,
    ) -> CategoryImportResult:
        """Import an uploaded text file."""
        check_import_filename(filename)
        return self.import_from_text(content, mode, source_name=filename)

    def export_to_text(self) -> str:
        """Get the categories as text, one per line.

        Raises:
            EmptyCollectionError: If there are no categories
        """
        content = encode_categories_text(self._categories)
        self.history.append(
            HistoryAction.EXPORTED_CATEGORIES,
            f"{len(self._categories)} categories to text file",
        )
        return content

    def clear(self, confirm: Confirm = always_confirm) -> bool:
        """Remove every category. Products keep their category values.

        Raises:
            EmptyCollectionError: If there are no categories
        """
        if not self._categories:
            raise EmptyCollectionError("No categories to clear!")

        count = len(self._categories)
        if not confirm(
            f"Are you sure you want to clear all {count} saved categories? "
            "This won't affect existing products."
        ):
            return False

        self._categories = []
        self.persist()
        self.history.append(HistoryAction.CLEARED_CATEGORIES, f"{count} categories")
        logger.info(f"Cleared {count} categories")
        return True
