"""API routers."""

from catalog_manager.api import products, categories, history, editor

__all__ = ["products", "categories", "history", "editor"]
