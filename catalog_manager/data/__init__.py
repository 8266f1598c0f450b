"""Default seed data."""

from catalog_manager.data.defaults import (
    DEFAULT_CATEGORIES,
    default_categories,
    default_history,
    default_products,
)

__all__ = [
    "DEFAULT_CATEGORIES",
    "default_categories",
    "default_history",
    "default_products",
]
