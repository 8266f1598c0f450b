"""Pydantic schemas for the activity history."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class HistoryAction(str, Enum):
    """Action labels written to the history."""

    ADDED = "Added"
    UPDATED = "Updated"
    DELETED = "Deleted"
    DELETED_ALL = "Deleted All"
    CLEARED_CATEGORIES = "Cleared Categories"
    EXPORTED = "Exported"
    EXPORTED_CATEGORIES = "Exported Categories"
    IMPORTED_CATEGORIES_REPLACE = "Imported Categories (Replace)"
    IMPORTED_CATEGORIES_ADD = "Imported Categories (Add)"


class HistoryEntry(BaseModel):
    """One line of the activity history."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    action: str
    # Stored as "product" by the browser version
    subject: str = Field(alias="product")
    timestamp: str


class HistoryListResponse(BaseModel):
    """Schema for the history list, newest first."""

    items: list[HistoryEntry]
    total: int


class ClearResponse(BaseModel):
    """Result of clearing a collection."""

    cleared: bool
