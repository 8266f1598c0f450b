"""Workspace wiring the catalog services to storage."""

import logging
from datetime import date, datetime
from typing import Callable

from sqlalchemy.orm import sessionmaker

from catalog_manager.config import Settings, settings as default_settings
from catalog_manager.data.defaults import (
    default_categories,
    default_history,
    default_products,
)
from catalog_manager.services.category_service import CATEGORY_ADAPTER, CategoryService
from catalog_manager.services.editor_service import EditorService
from catalog_manager.services.export_service import ExportService
from catalog_manager.services.history_service import HISTORY_ADAPTER, HistoryService
from catalog_manager.services.product_service import PRODUCT_ADAPTER, ProductService
from catalog_manager.services.storage_service import StorageService
from catalog_manager.utils.identifiers import Clock

logger = logging.getLogger(__name__)


class CatalogWorkspace:
    """The three stored collections and the services working on them.

    Collections are read once here; afterwards every service writes its
    collection back after each change.
    """

    def __init__(
        self,
        session_factory: sessionmaker,
        config: Settings | None = None,
        clock: Clock = datetime.now,
        today: Callable[[], date] = date.today,
    ):
        config = config or default_settings
        self.storage = StorageService(session_factory)

        products_key = config.storage_key("products")
        history_key = config.storage_key("history")
        categories_key = config.storage_key("categories")

        self.history = HistoryService(
            self.storage,
            history_key,
            self.storage.load_collection(
                history_key, HISTORY_ADAPTER, lambda: default_history(clock())
            ),
            clock=clock,
        )
        self.categories = CategoryService(
            self.storage,
            categories_key,
            self.storage.load_collection(categories_key, CATEGORY_ADAPTER, default_categories),
            self.history,
        )
        self.products = ProductService(
            self.storage,
            products_key,
            self.storage.load_collection(products_key, PRODUCT_ADAPTER, default_products),
            self.categories,
            self.history,
            clock=clock,
        )
        self.exports = ExportService(
            self.products,
            self.categories,
            self.history,
            file_prefix=config.export_file_prefix,
            today=today,
        )
        self.editor = EditorService(
            self.products,
            self.categories,
            seo_description_limit=config.seo_description_limit,
        )
        self.products.on_delete_all = self.editor.reset

        logger.info(
            f"Workspace ready: {self.products.count()} products, "
            f"{self.categories.count()} categories, {self.history.count()} history entries"
        )
