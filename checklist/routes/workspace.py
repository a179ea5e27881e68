"""
Current view, selection and filter routes.
"""

from fastapi import APIRouter, Depends

from checklist.controller import ChecklistController, get_controller
from checklist.schemas import ChecklistView, FilterUpdate, SelectionUpdate

router = APIRouter()


@router.get("/view", response_model=ChecklistView)
async def get_view(
    controller: ChecklistController = Depends(get_controller),
) -> ChecklistView:
    """Render the checklist screen for the current state."""
    return await controller.view()


@router.put("/selection", response_model=ChecklistView)
async def update_selection(
    selection_in: SelectionUpdate,
    controller: ChecklistController = Depends(get_controller),
) -> ChecklistView:
    """Select an entity, or clear the selection with `entity_id: null`."""
    return await controller.select_entity(selection_in.entity_id)


@router.put("/filter", response_model=ChecklistView)
async def update_filter(
    filter_in: FilterUpdate,
    controller: ChecklistController = Depends(get_controller),
) -> ChecklistView:
    """Restrict the entity selector to one project ("all" for every project)."""
    return await controller.set_filter(filter_in.project_filter)
