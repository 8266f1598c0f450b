"""Pydantic schemas for the product editor form."""

from enum import Enum

from pydantic import BaseModel, Field

from catalog_manager.schemas.product import ProductDraft

# Select-box value that switches the category field to free text
CUSTOM_CATEGORY = "custom"


class EditorMode(str, Enum):
    """Whether the form creates a new product or edits an existing one."""

    CREATE = "create"
    EDITING = "editing"


class CategoryMode(str, Enum):
    """How the category field is filled in."""

    SELECT = "select"
    CUSTOM = "custom"


class EditorState(BaseModel):
    """Transient state of the add/edit form."""

    draft: ProductDraft = Field(default_factory=ProductDraft)
    mode: EditorMode = EditorMode.CREATE
    editing_id: int | None = None
    category_mode: CategoryMode = CategoryMode.SELECT
    show_history: bool = False
    seo_description_length: int = 0
    seo_description_limit: int = 160


class CategoryChoice(BaseModel):
    """Value picked in the category select box."""

    value: str = Field(description=f"A category path, '' for none, or '{CUSTOM_CATEGORY}'")
