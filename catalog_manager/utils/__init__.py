"""Utility modules."""

from catalog_manager.utils.confirm import Confirm, always_confirm, confirm_from_flag
from catalog_manager.utils.identifiers import MonotonicIdFactory, format_timestamp

__all__ = [
    "Confirm",
    "always_confirm",
    "confirm_from_flag",
    "MonotonicIdFactory",
    "format_timestamp",
]
