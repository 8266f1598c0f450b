"""Pydantic schemas for the category registry."""

from enum import Enum

from pydantic import BaseModel, Field


class CategoryImportMode(str, Enum):
    """How imported categories combine with the existing ones."""

    REPLACE = "replace"
    MERGE = "merge"


class CategoryCreate(BaseModel):
    """Schema for adding one category path."""

    path: str = Field(description="Category path, e.g. 'Clothing > T-Shirts'")


class CategoryImportRequest(BaseModel):
    """Request schema for importing categories from a text file."""

    filename: str = Field(description="Name of the uploaded file, must end in .txt")
    content: str = Field(description="File contents, one category per line")
    mode: CategoryImportMode = Field(
        default=CategoryImportMode.MERGE,
        description="'replace' discards the current categories, 'merge' adds to them",
    )


class CategoryImportResult(BaseModel):
    """Response schema for a category import."""

    mode: CategoryImportMode
    found: int = Field(description="Valid lines in the file, duplicates included")
    total: int = Field(description="Categories in the registry after the import")


class CategoryListResponse(BaseModel):
    """Schema for the sorted category list."""

    items: list[str]
    total: int


class CategoryAddResponse(BaseModel):
    """Result of adding one category path."""

    added: bool
    items: list[str]
