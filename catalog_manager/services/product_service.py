"""Product service for CRUD operations."""

import logging
from datetime import datetime
from typing import Callable

from pydantic import TypeAdapter

from catalog_manager.exceptions import EmptyCollectionError, ProductValidationError
from catalog_manager.schemas.history import HistoryAction
from catalog_manager.schemas.product import Product, ProductDraft
from catalog_manager.services.category_service import CategoryService
from catalog_manager.services.history_service import HistoryService
from catalog_manager.services.storage_service import StorageService
from catalog_manager.utils.confirm import Confirm, always_confirm
from catalog_manager.utils.identifiers import Clock, MonotonicIdFactory

logger = logging.getLogger(__name__)

PRODUCT_ADAPTER = TypeAdapter(list[Product])


class ProductService:
    """Service for product CRUD operations."""

    def __init__(
        self,
        storage: StorageService,
        key: str,
        products: list[Product],
        categories: CategoryService,
        history: HistoryService,
        clock: Clock = datetime.now,
    ):
        self.storage = storage
        self.key = key
        self._products = list(products)
        self.categories = categories
        self.history = history
        self._next_id = MonotonicIdFactory(clock, (p.id for p in self._products))
        # Called after delete_all so an open edit form is discarded
        self.on_delete_all: Callable[[], None] | None = None

    def list(self) -> list[Product]:
        """Get all products in catalog order."""
        return list(self._products)

    def get(self, product_id: int) -> Product | None:
        """Get a product by ID."""
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def count(self) -> int:
        """Count total products."""
        return len(self._products)

    def persist(self) -> bool:
        return self.storage.save_collection(self.key, PRODUCT_ADAPTER, self._products)

    def validate(self, draft: ProductDraft) -> None:
        """Check the required fields.

        Raises:
            ProductValidationError: If SKU, name or price is empty
        """
        missing = draft.missing_required_fields()
        if missing:
            raise ProductValidationError(missing)

    def create(self, draft: ProductDraft) -> Product:
        """Create a new product."""
        self.validate(draft)
        self.categories.add(draft.category)

        product = Product.from_draft(self._next_id(), draft)
        self._products.append(product)
        self.persist()
        self.history.append(HistoryAction.ADDED, product.name, product.sku)

        logger.info(f"Created product {product.id} ({product.sku})")
        return product

    def update(self, product_id: int, draft: ProductDraft) -> Product | None:
        """Replace an existing product in place, keeping its id.

        Unknown ids are ignored and return None.
        """
        self.validate(draft)

        for index, existing in enumerate(self._products):
            if existing.id == product_id:
                break
        else:
            logger.debug(f"Update of unknown product {product_id} ignored")
            return None

        self.categories.add(draft.category)

        product = Product.from_draft(product_id, draft)
        self._products[index] = product
        self.persist()
        self.history.append(HistoryAction.UPDATED, product.name, product.sku)

        logger.info(f"Updated product {product.id} ({product.sku})")
        return product

    def delete(self, product_id: int, confirm: Confirm = always_confirm) -> Product | None:
        """Delete a product.

        Returns the removed product, or None if it was unknown or not confirmed.
        """
        product = self.get(product_id)
        if product is None:
            return None

        if not confirm(f'Are you sure you want to delete "{product.name}"?'):
            return None

        self._products = [p for p in self._products if p.id != product_id]
        self.persist()
        self.history.append(HistoryAction.DELETED, product.name, product.sku)

        logger.info(f"Deleted product {product.id} ({product.sku})")
        return product

    def delete_all(self, confirm: Confirm = always_confirm) -> int:
        """Delete every product.

        Returns the number of products removed, 0 if not confirmed.

        Raises:
            EmptyCollectionError: If the catalog is already empty
        """
        if not self._products:
            raise EmptyCollectionError("No products to delete!")

        count = len(self._products)
        if not confirm(
            f"Are you sure you want to delete ALL {count} products? "
            "This action cannot be undone!"
        ):
            return 0

        self._products = []
        self.persist()
        self.history.append(HistoryAction.DELETED_ALL, f"{count} products")
        if self.on_delete_all is not None:
            self.on_delete_all()

        logger.info(f"Deleted all {count} products")
        return count
