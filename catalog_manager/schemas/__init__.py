"""Pydantic schemas for request/response validation and storage."""

from catalog_manager.schemas.product import (
    ProductDraft,
    Product,
    DraftUpdate,
    ProductListResponse,
    DeleteAllResponse,
)
from catalog_manager.schemas.history import (
    HistoryAction,
    HistoryEntry,
    HistoryListResponse,
    ClearResponse,
)
from catalog_manager.schemas.category import (
    CategoryImportMode,
    CategoryCreate,
    CategoryImportRequest,
    CategoryImportResult,
    CategoryListResponse,
    CategoryAddResponse,
)
from catalog_manager.schemas.editor import (
    CategoryChoice,
    CategoryMode,
    EditorMode,
    EditorState,
)
from catalog_manager.schemas.export import ExportFile

__all__ = [
    "ProductDraft",
    "Product",
    "DraftUpdate",
    "ProductListResponse",
    "DeleteAllResponse",
    "HistoryAction",
    "HistoryEntry",
    "HistoryListResponse",
    "ClearResponse",
    "CategoryImportMode",
    "CategoryCreate",
    "CategoryImportRequest",
    "CategoryImportResult",
    "CategoryListResponse",
    "CategoryAddResponse",
    "CategoryChoice",
    "CategoryMode",
    "EditorMode",
    "EditorState",
    "ExportFile",
]
