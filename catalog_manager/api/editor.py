"""Editor form API endpoints."""

from fastapi import APIRouter, HTTPException, status

from catalog_manager.dependencies import Workspace
from catalog_manager.schemas.editor import CategoryChoice, EditorState
from catalog_manager.schemas.product import DraftUpdate, Product

router = APIRouter()


@router.get("", response_model=EditorState)
async def get_editor(workspace: Workspace):
    """Get the current form state."""
    return workspace.editor.state()


@router.patch("/draft", response_model=EditorState)
async def update_draft(changes: DraftUpdate, workspace: Workspace):
    """Change fields of the draft."""
    workspace.editor.update_draft(changes)
    return workspace.editor.state()


@router.post("/category", response_model=EditorState)
async def choose_category(choice: CategoryChoice, workspace: Workspace):
    """Pick a category from the list, or 'custom' for free text."""
    workspace.editor.choose_category(choice.value)
    return workspace.editor.state()


@router.post("/edit/{product_id}", response_model=EditorState)
async def start_edit(product_id: int, workspace: Workspace):
    """Load a product into the form."""
    return workspace.editor.start_edit(product_id)


@router.post("/submit", response_model=Product)
async def submit(workspace: Workspace):
    """Add the draft as a product, or save the product being edited."""
    editing_id = workspace.editor.editing_id
    product = workspace.editor.submit()

    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product with ID {editing_id} no longer exists",
        )

    return product


@router.post("/cancel", response_model=EditorState)
async def cancel(workspace: Workspace):
    """Discard the draft."""
    workspace.editor.cancel()
    return workspace.editor.state()


@router.post("/history-panel", response_model=EditorState)
async def toggle_history_panel(workspace: Workspace):
    """Show or hide the history panel."""
    workspace.editor.toggle_history()
    return workspace.editor.state()
