"""Default collections used when storage is empty or unreadable."""

from datetime import datetime

from catalog_manager.schemas.history import HistoryAction, HistoryEntry
from catalog_manager.schemas.product import Product
from catalog_manager.utils.identifiers import format_timestamp

SAMPLE_PRODUCT_ID = 1

DEFAULT_CATEGORIES = [
    "Clothing > T-Shirts",
    "Clothing > Shirts",
    "Clothing > Pants",
    "Electronics > Phones",
    "Electronics > Laptops",
    "Home & Garden > Furniture",
    "Home & Garden > Plants",
    "Sports > Fitness",
    "Sports > Yoga",
    "Books > Technology",
    "Books > Fiction",
    "Food & Beverage > Coffee",
    "Food & Beverage > Tea",
    "Accessories > Wallets",
    "Accessories > Bags",
]


def default_products() -> list[Product]:
    """One sample product."""
    return [
        Product(
            id=SAMPLE_PRODUCT_ID,
            sku="TEE-001",
            name="Classic Cotton T-Shirt",
            description=(
                "Made from 100% premium cotton, this classic t-shirt offers superior "
                "comfort and durability. Available in multiple colors and sizes."
            ),
            short_description="Comfortable cotton t-shirt perfect for everyday wear",
            price="19.99",
            category="Clothing > T-Shirts",
            tags="cotton,casual,comfort,everyday",
            brand="ComfortWear",
            seo_description=(
                "Buy premium cotton t-shirts online. Super comfortable, durable, "
                "and available in multiple sizes."
            ),
            focus_keyword="cotton t-shirt",
        )
    ]


def default_history(now: datetime | None = None) -> list[HistoryEntry]:
    """The history entry for adding the sample product."""
    return [
        HistoryEntry(
            id=1,
            action=HistoryAction.ADDED.value,
            subject="Classic Cotton T-Shirt (TEE-001)",
            timestamp=format_timestamp(now or datetime.now()),
        )
    ]


def default_categories() -> list[str]:
    """The starter category paths."""
    return list(DEFAULT_CATEGORIES)
