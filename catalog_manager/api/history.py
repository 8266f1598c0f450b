"""History API endpoints."""

from fastapi import APIRouter

from catalog_manager.dependencies import Confirmation, Workspace
from catalog_manager.schemas.history import ClearResponse, HistoryListResponse

router = APIRouter()


@router.get("", response_model=HistoryListResponse)
async def list_history(workspace: Workspace):
    """List the activity history, newest first."""
    entries = workspace.history.list()
    return HistoryListResponse(items=entries, total=len(entries))


@router.delete("", response_model=ClearResponse)
async def clear_history(workspace: Workspace, confirm: Confirmation):
    """Clear the activity history."""
    return ClearResponse(cleared=workspace.history.clear(confirm))
