"""Test the key-value storage service and start-up loading."""

import json

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from catalog_manager.data.defaults import DEFAULT_CATEGORIES
from catalog_manager.exceptions import StorageParseError
from catalog_manager.services.category_service import CATEGORY_ADAPTER
from catalog_manager.services.product_service import PRODUCT_ADAPTER
from catalog_manager.services.storage_service import StorageService


class TestLoadSave:
    """Tests for raw string slots."""

    def test_missing_key_returns_none(self, storage):
        assert storage.load("nothing_here") is None

    def test_save_then_load(self, storage):
        assert storage.save("greeting", "hello") is True
        assert storage.load("greeting") == "hello"

    def test_save_overwrites(self, storage):
        storage.save("greeting", "hello")
        storage.save("greeting", "bye")
        assert storage.load("greeting") == "bye"

    def test_write_failure_returns_false(self):
        """A failing database does not raise out of save()."""
        engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        # No tables created, so the insert fails
        broken = StorageService(sessionmaker(bind=engine))
        assert broken.save("greeting", "hello") is False


class TestCollections:
    """Tests for JSON-encoded collections."""

    def test_missing_collection_uses_default(self, storage):
        items = storage.load_collection("cats", CATEGORY_ADAPTER, lambda: ["A > B"])
        assert items == ["A > B"]

    def test_corrupt_collection_uses_default(self, storage):
        storage.save("cats", "{not json")
        items = storage.load_collection("cats", CATEGORY_ADAPTER, lambda: ["A > B"])
        assert items == ["A > B"]

    def test_wrong_shape_uses_default(self, storage):
        storage.save("cats", json.dumps({"a": 1}))
        items = storage.load_collection("cats", CATEGORY_ADAPTER, lambda: ["fallback"])
        assert items == ["fallback"]

    def test_parse_raises_storage_parse_error(self, storage):
        with pytest.raises(StorageParseError) as exc_info:
            storage.parse("cats", "[1, 2", CATEGORY_ADAPTER)
        assert exc_info.value.key == "cats"

    def test_products_stored_with_browser_keys(self, storage, workspace):
        workspace.products.persist()
        stored = json.loads(storage.load("woocommerce_products"))
        assert stored[0]["shortDescription"].startswith("Comfortable")
        assert stored[0]["categories"] == "Clothing > T-Shirts"
        assert stored[0]["seoDescription"]
        assert stored[0]["focusKeyword"] == "cotton t-shirt"

    def test_loads_blob_written_by_browser(self, storage):
        blob = json.dumps([
            {
                "id": 1700000000000,
                "sku": "BAG-9",
                "name": "Tote",
                "description": "",
                "shortDescription": "Canvas tote",
                "price": "15",
                "categories": "Accessories > Bags",
                "tags": "",
                "brand": "",
                "seoDescription": "",
                "focusKeyword": "",
            }
        ])
        storage.save("products", blob)

        products = storage.load_collection("products", PRODUCT_ADAPTER, list)

        assert len(products) == 1
        assert products[0].id == 1700000000000
        assert products[0].short_description == "Canvas tote"
        assert products[0].category == "Accessories > Bags"


class TestWorkspaceStartup:
    """Tests for loading the three collections at start-up."""

    def test_empty_store_gets_seed(self, workspace):
        products = workspace.products.list()
        assert len(products) == 1
        assert products[0].sku == "TEE-001"

        history = workspace.history.list()
        assert len(history) == 1
        assert history[0].action == "Added"
        assert history[0].subject == "Classic Cotton T-Shirt (TEE-001)"

        assert workspace.categories.list() == sorted(DEFAULT_CATEGORIES)

    def test_corrupt_key_falls_back_independently(self, storage, make_workspace):
        storage.save("woocommerce_categories", json.dumps(["Only > One"]))
        storage.save("woocommerce_products", "garbage")

        workspace = make_workspace()

        assert workspace.categories.list() == ["Only > One"]
        assert [p.sku for p in workspace.products.list()] == ["TEE-001"]

    def test_changes_survive_restart(self, make_workspace, draft):
        first = make_workspace()
        first.products.create(draft)

        second = make_workspace()

        assert [p.sku for p in second.products.list()] == ["TEE-001", "MUG-001"]
        assert "Home & Garden > Kitchen" in second.categories
        assert second.history.list()[0].action == "Added"

    def test_stored_empty_collections_stay_empty(self, empty_workspace):
        assert empty_workspace.products.count() == 0
        assert empty_workspace.history.count() == 0
        assert empty_workspace.categories.count() == 0
