"""Category API endpoints."""

from fastapi import APIRouter

from catalog_manager.api.products import download
from catalog_manager.dependencies import Confirmation, Workspace
from catalog_manager.schemas.category import (
    CategoryAddResponse,
    CategoryCreate,
    CategoryImportRequest,
    CategoryImportResult,
    CategoryListResponse,
)
from catalog_manager.schemas.history import ClearResponse

router = APIRouter()


@router.get("", response_model=CategoryListResponse)
async def list_categories(workspace: Workspace):
    """List all categories, sorted."""
    categories = workspace.categories.list()
    return CategoryListResponse(items=categories, total=len(categories))


@router.post("", response_model=CategoryAddResponse)
async def add_category(category_in: CategoryCreate, workspace: Workspace):
    """Add one category path. Known or blank paths are ignored."""
    added = workspace.categories.add(category_in.path)
    return CategoryAddResponse(added=added, items=workspace.categories.list())


@router.post("/import", response_model=CategoryImportResult)
async def import_categories(import_in: CategoryImportRequest, workspace: Workspace):
    """Import categories from a .txt file, one per line.

    Blank lines and lines starting with '#' are skipped.
    """
    return workspace.categories.import_file(
        import_in.filename,
        import_in.content,
        import_in.mode,
    )


@router.get("/export")
async def export_categories(workspace: Workspace):
    """Download the categories as a text file."""
    return download(workspace.exports.export_categories())


@router.delete("", response_model=ClearResponse)
async def clear_categories(workspace: Workspace, confirm: Confirmation):
    """Remove all saved categories. Products are not changed."""
    return ClearResponse(cleared=workspace.categories.clear(confirm))
