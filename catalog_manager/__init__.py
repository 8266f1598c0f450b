"""Catalog Manager: WooCommerce product catalog editor."""
