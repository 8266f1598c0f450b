"""Editor service holding the add/edit form state."""

import logging

from catalog_manager.exceptions import ProductNotFoundError
from catalog_manager.schemas.editor import (
    CUSTOM_CATEGORY,
    CategoryMode,
    EditorMode,
    EditorState,
)
from catalog_manager.schemas.product import DraftUpdate, Product, ProductDraft
from catalog_manager.services.category_service import CategoryService
from catalog_manager.services.product_service import ProductService

logger = logging.getLogger(__name__)


class EditorService:
    """The single add/edit form of the editor.

    The draft is never persisted; it is discarded on submit, cancel
    and when all products are deleted.
    """

    def __init__(
        self,
        products: ProductService,
        categories: CategoryService,
        seo_description_limit: int = 160,
    ):
        self.products = products
        self.categories = categories
        self.seo_description_limit = seo_description_limit
        self.show_history = False
        self.reset()

    @property
    def is_editing(self) -> bool:
        return self.mode == EditorMode.EDITING

    def state(self) -> EditorState:
        """Get a snapshot of the form."""
        return EditorState(
            draft=self.draft.model_copy(),
            mode=self.mode,
            editing_id=self.editing_id,
            category_mode=self.category_mode,
            show_history=self.show_history,
            seo_description_length=len(self.draft.seo_description),
            seo_description_limit=self.seo_description_limit,
        )

    def reset(self) -> None:
        """Blank the form and go back to create mode."""
        self.draft = ProductDraft()
        self.mode = EditorMode.CREATE
        self.editing_id: int | None = None
        self.category_mode = CategoryMode.SELECT

    def cancel(self) -> None:
        self.reset()

    def update_draft(self, changes: DraftUpdate) -> ProductDraft:
        """Apply the fields the user changed."""
        self.draft = self.draft.model_copy(update=changes.model_dump(exclude_none=True))
        return self.draft

    def choose_category(self, value: str) -> None:
        """Handle a change of the category select box."""
        if value == CUSTOM_CATEGORY:
            self.category_mode = CategoryMode.CUSTOM
            self.draft = self.draft.model_copy(update={"category": ""})
        else:
            self.category_mode = CategoryMode.SELECT
            self.draft = self.draft.model_copy(update={"category": value})

    def start_edit(self, product_id: int) -> EditorState:
        """Load a product into the form for editing.

        Raises:
            ProductNotFoundError: If the product does not exist
        """
        product = self.products.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        self.draft = product.to_draft()
        self.mode = EditorMode.EDITING
        self.editing_id = product.id
        if product.category in self.categories:
            self.category_mode = CategoryMode.SELECT
        else:
            self.category_mode = CategoryMode.CUSTOM

        logger.debug(f"Editing product {product.id}")
        return self.state()

    def submit(self) -> Product | None:
        """Save the draft as a new product or over the one being edited.

        The form is reset on success and kept on validation errors.
        """
        if self.is_editing:
            product = self.products.update(self.editing_id, self.draft)
        else:
            product = self.products.create(self.draft)

        self.reset()
        return product

    def toggle_history(self) -> bool:
        """Show or hide the history panel."""
        self.show_history = not self.show_history
        return self.show_history
