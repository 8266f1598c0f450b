"""Business logic services."""

from catalog_manager.services.storage_service import StorageService
from catalog_manager.services.history_service import HistoryService
from catalog_manager.services.category_service import CategoryService
from catalog_manager.services.product_service import ProductService
from catalog_manager.services.export_service import ExportService
from catalog_manager.services.editor_service import EditorService
from catalog_manager.services.workspace import CatalogWorkspace

__all__ = [
    "StorageService",
    "HistoryService",
    "CategoryService",
    "ProductService",
    "ExportService",
    "EditorService",
    "CatalogWorkspace",
]
