"""Export encoders for products (CSV) and categories (plain text)."""

import logging
from datetime import date
from typing import TYPE_CHECKING, Callable

from catalog_manager.exceptions import EmptyCollectionError
from catalog_manager.schemas.export import ExportFile
from catalog_manager.schemas.history import HistoryAction
from catalog_manager.schemas.product import Product

if TYPE_CHECKING:
    from catalog_manager.services.category_service import CategoryService
    from catalog_manager.services.history_service import HistoryService
    from catalog_manager.services.product_service import ProductService

logger = logging.getLogger(__name__)

# Column headers understood by the WooCommerce product importer
PRODUCT_CSV_HEADERS = [
    "SKU",
    "Name",
    "Description",
    "Short description",
    "Regular price",
    "Categories",
    "Tags",
    "Meta: rank_math_description",
    "Meta: rank_math_focus_keyword",
    "Meta: _yoast_wpseo_primary_product_brand",
]

CSV_MEDIA_TYPE = "text/csv"
TEXT_MEDIA_TYPE = "text/plain"


def _quoted(value: str) -> str:
    # Wrapped verbatim: embedded quotes and newlines are not escaped
    return f'"{value}"'


def encode_product_row(product: Product) -> str:
    """Encode one product as a CSV row in header order."""
    return ",".join([
        _quoted(product.sku),
        _quoted(product.name),
        _quoted(product.description),
        _quoted(product.short_description),
        product.price,
        _quoted(product.category),
        _quoted(product.tags),
        _quoted(product.seo_description),
        _quoted(product.focus_keyword),
        _quoted(product.brand),
    ])


def encode_products_csv(products: list[Product]) -> str:
    """Encode products as CSV text with the importer header.

    Raises:
        EmptyCollectionError: If there are no products
    """
    if not products:
        raise EmptyCollectionError("No products to export!")

    lines = [",".join(PRODUCT_CSV_HEADERS)]
    lines.extend(encode_product_row(p) for p in products)
    return "\n".join(lines)


def encode_categories_text(categories: list[str]) -> str:
    """Encode categories one per line, without header or quoting.

    Raises:
        EmptyCollectionError: If there are no categories
    """
    if not categories:
        raise EmptyCollectionError("No categories to export!")
    return "\n".join(categories)


def export_filename(prefix: str, kind: str, extension: str, today: date) -> str:
    """Build a dated download name, e.g. woocommerce-products-2024-05-01.csv."""
    return f"{prefix}-{kind}-{today.isoformat()}.{extension}"


class ExportService:
    """Service producing the downloadable export files."""

    def __init__(
        self,
        products: "ProductService",
        categories: "CategoryService",
        history: "HistoryService",
        file_prefix: str = "woocommerce",
        today: Callable[[], date] = date.today,
    ):
        self.products = products
        self.categories = categories
        self.history = history
        self.file_prefix = file_prefix
        self.today = today

    def export_products(self) -> ExportFile:
        """Export the catalog as a CSV file.

        Raises:
            EmptyCollectionError: If the catalog is empty
        """
        products = self.products.list()
        content = encode_products_csv(products)
        self.history.append(HistoryAction.EXPORTED, f"{len(products)} products to CSV")
        logger.info(f"Exported {len(products)} products to CSV")

        return ExportFile(
            filename=export_filename(self.file_prefix, "products", "csv", self.today()),
            media_type=CSV_MEDIA_TYPE,
            content=content,
            count=len(products),
        )

    def export_categories(self) -> ExportFile:
        """Export the category registry as a text file.

        Raises:
            EmptyCollectionError: If there are no categories
        """
        content = self.categories.export_to_text()
        count = self.categories.count()
        logger.info(f"Exported {count} categories to text")

        return ExportFile(
            filename=export_filename(self.file_prefix, "categories", "txt", self.today()),
            media_type=TEXT_MEDIA_TYPE,
            content=content,
            count=count,
        )
