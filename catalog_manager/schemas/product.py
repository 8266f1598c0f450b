"""Pydantic schemas for Product."""

from pydantic import BaseModel, ConfigDict, Field

# Required fields and the labels shown when they are missing
REQUIRED_FIELDS = {
    "sku": "SKU",
    "name": "Name",
    "price": "Price",
}


class ProductDraft(BaseModel):
    """Form fields of a product, used for create/update and as the editor draft.

    Aliases are the keys the browser version wrote to storage.
    """

    model_config = ConfigDict(populate_by_name=True)

    sku: str = ""
    name: str = ""
    description: str = ""
    short_description: str = Field("", alias="shortDescription")
    price: str = ""
    category: str = Field("", alias="categories")
    tags: str = ""
    brand: str = ""
    seo_description: str = Field("", alias="seoDescription")
    focus_keyword: str = Field("", alias="focusKeyword")

    def missing_required_fields(self) -> list[str]:
        """Labels of the required fields that are empty."""
        return [
            label
            for field, label in REQUIRED_FIELDS.items()
            if not getattr(self, field)
        ]


class Product(ProductDraft):
    """A stored product record."""

    id: int

    @classmethod
    def from_draft(cls, product_id: int, draft: ProductDraft) -> "Product":
        """Build a record from a draft, keeping the given id."""
        return cls(id=product_id, **draft.model_dump())

    def to_draft(self) -> ProductDraft:
        """Copy the record's fields into a new draft."""
        return ProductDraft(**self.model_dump(exclude={"id"}))


class DraftUpdate(BaseModel):
    """Partial change to the editor draft."""

    model_config = ConfigDict(populate_by_name=True)

    sku: str | None = None
    name: str | None = None
    description: str | None = None
    short_description: str | None = Field(None, alias="shortDescription")
    price: str | None = None
    category: str | None = Field(None, alias="categories")
    tags: str | None = None
    brand: str | None = None
    seo_description: str | None = Field(None, alias="seoDescription")
    focus_keyword: str | None = Field(None, alias="focusKeyword")


class ProductListResponse(BaseModel):
    """Schema for product list response."""

    items: list[Product]
    total: int


class DeleteAllResponse(BaseModel):
    """Result of deleting every product."""

    deleted: int
