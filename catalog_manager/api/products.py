"""Product API endpoints."""

from fastapi import APIRouter, Response, status

from catalog_manager.dependencies import Confirmation, Workspace
from catalog_manager.exceptions import ProductNotFoundError
from catalog_manager.schemas.export import ExportFile
from catalog_manager.schemas.product import (
    DeleteAllResponse,
    Product,
    ProductDraft,
    ProductListResponse,
)

router = APIRouter()


def download(export: ExportFile) -> Response:
    """Wrap an export file as an attachment response."""
    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )


@router.get("", response_model=ProductListResponse)
async def list_products(workspace: Workspace):
    """List products in catalog order."""
    products = workspace.products.list()
    return ProductListResponse(items=products, total=len(products))


@router.get("/export")
async def export_products(workspace: Workspace):
    """Download the catalog as a WooCommerce import CSV."""
    return download(workspace.exports.export_products())


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: int, workspace: Workspace):
    """Get a product by ID."""
    product = workspace.products.get(product_id)

    if not product:
        raise ProductNotFoundError(product_id)

    return product


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_product(product_in: ProductDraft, workspace: Workspace):
    """Create a new product."""
    return workspace.products.create(product_in)


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: int,
    product_in: ProductDraft,
    workspace: Workspace,
):
    """Update an existing product."""
    product = workspace.products.update(product_id, product_in)

    if not product:
        raise ProductNotFoundError(product_id)

    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int,
    workspace: Workspace,
    confirm: Confirmation,
):
    """Delete a product."""
    if not workspace.products.get(product_id):
        raise ProductNotFoundError(product_id)

    workspace.products.delete(product_id, confirm)


@router.delete("", response_model=DeleteAllResponse)
async def delete_all_products(workspace: Workspace, confirm: Confirmation):
    """Delete every product."""
    deleted = workspace.products.delete_all(confirm)
    return DeleteAllResponse(deleted=deleted)
