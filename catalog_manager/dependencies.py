"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Query, Request

from catalog_manager.services.workspace import CatalogWorkspace
from catalog_manager.utils.confirm import Confirm, confirm_from_flag


def get_workspace(request: Request) -> CatalogWorkspace:
    """Get the workspace created at application start-up."""
    return request.app.state.workspace


def get_confirm(
    confirm: bool = Query(False, description="Set to true once the user agreed to the prompt"),
) -> Confirm:
    """Confirmation capability for destructive actions."""
    return confirm_from_flag(confirm)


# Type aliases for common dependencies
Workspace = Annotated[CatalogWorkspace, Depends(get_workspace)]
Confirmation = Annotated[Confirm, Depends(get_confirm)]
