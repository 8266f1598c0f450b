"""Test the add/edit form."""

import pytest

from catalog_manager.exceptions import ProductNotFoundError, ProductValidationError
from catalog_manager.schemas.editor import CategoryMode, EditorMode
from catalog_manager.schemas.product import DraftUpdate


class TestDraft:
    """Tests for filling in the form."""

    def test_starts_blank(self, workspace):
        state = workspace.editor.state()
        assert state.mode == EditorMode.CREATE
        assert state.editing_id is None
        assert state.category_mode == CategoryMode.SELECT
        assert state.draft.sku == ""

    def test_update_draft_merges(self, workspace):
        editor = workspace.editor
        editor.update_draft(DraftUpdate(sku="S-1"))
        editor.update_draft(DraftUpdate(name="Socks"))
        assert editor.draft.sku == "S-1"
        assert editor.draft.name == "Socks"

    def test_update_draft_accepts_aliases(self, workspace):
        workspace.editor.update_draft(DraftUpdate.model_validate({"shortDescription": "Warm"}))
        assert workspace.editor.draft.short_description == "Warm"

    def test_seo_counter(self, workspace):
        workspace.editor.update_draft(DraftUpdate(seo_description="x" * 42))
        state = workspace.editor.state()
        assert state.seo_description_length == 42
        assert state.seo_description_limit == 160

    def test_choose_custom_category(self, workspace):
        editor = workspace.editor
        editor.choose_category("Books > Fiction")
        assert editor.draft.category == "Books > Fiction"

        editor.choose_category("custom")

        assert editor.category_mode == CategoryMode.CUSTOM
        assert editor.draft.category == ""

    def test_choose_listed_category(self, workspace):
        editor = workspace.editor
        editor.choose_category("custom")
        editor.choose_category("Sports > Yoga")
        assert editor.category_mode == CategoryMode.SELECT
        assert editor.draft.category == "Sports > Yoga"

    def test_toggle_history(self, workspace):
        assert workspace.editor.toggle_history() is True
        assert workspace.editor.toggle_history() is False


class TestStartEdit:
    """Tests for loading a product into the form."""

    def test_known_category_selects(self, workspace):
        product = workspace.products.list()[0]

        state = workspace.editor.start_edit(product.id)

        assert state.mode == EditorMode.EDITING
        assert state.editing_id == product.id
        assert state.draft.sku == "TEE-001"
        assert state.category_mode == CategoryMode.SELECT

    def test_unknown_category_is_custom(self, workspace):
        product = workspace.products.list()[0]
        workspace.categories.clear()

        state = workspace.editor.start_edit(product.id)

        assert state.category_mode == CategoryMode.CUSTOM
        assert state.draft.category == "Clothing > T-Shirts"

    def test_unknown_product(self, workspace):
        with pytest.raises(ProductNotFoundError):
            workspace.editor.start_edit(31337)


class TestSubmit:
    """Tests for saving the form."""

    def test_submit_creates(self, workspace):
        editor = workspace.editor
        editor.update_draft(DraftUpdate(sku="S-1", name="Socks", price="4.99"))

        product = editor.submit()

        assert workspace.products.get(product.id).name == "Socks"
        assert editor.state().draft.sku == ""

    def test_submit_updates_edited_product(self, workspace):
        editor = workspace.editor
        product = workspace.products.list()[0]
        editor.start_edit(product.id)
        editor.update_draft(DraftUpdate(price="24.99"))

        saved = editor.submit()

        assert saved.id == product.id
        assert workspace.products.count() == 1
        assert workspace.products.get(product.id).price == "24.99"
        assert workspace.history.list()[0].action == "Updated"
        assert editor.state().mode == EditorMode.CREATE

    def test_invalid_submit_keeps_draft(self, workspace):
        editor = workspace.editor
        editor.update_draft(DraftUpdate(sku="S-1", name="Socks"))

        with pytest.raises(ProductValidationError):
            editor.submit()

        assert editor.draft.sku == "S-1"

    def test_cancel_resets(self, workspace):
        editor = workspace.editor
        editor.start_edit(workspace.products.list()[0].id)
        editor.choose_category("custom")

        editor.cancel()

        state = editor.state()
        assert state.mode == EditorMode.CREATE
        assert state.category_mode == CategoryMode.SELECT
        assert state.draft.name == ""
