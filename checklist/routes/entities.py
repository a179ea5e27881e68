"""
Entity and checklist item routes.
"""

from fastapi import APIRouter, Depends, Response, status

from checklist.controller import ChecklistController, get_controller
from checklist.exceptions import ErrorResponse, NotFoundError
from checklist.logging_config import get_logger
from checklist.schemas import (
    Category,
    ChecklistView,
    Entity,
    EntityCreate,
    EntityRead,
    ItemCreate,
)
from checklist.services.progress import category_progress, overall_progress

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/",
    response_model=ChecklistView,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ErrorResponse}},
)
async def create_entity(
    entity_in: EntityCreate,
    controller: ChecklistController = Depends(get_controller),
) -> ChecklistView:
    """
    Create an entity seeded with the catalog templates.

    The new entity becomes the selection and the filter switches to its project.
    """
    return await controller.create_entity(entity_in.name, entity_in.project_id)


@router.get("/", response_model=list[Entity])
async def list_entities(
    project_id: str | None = None,
    controller: ChecklistController = Depends(get_controller),
) -> list[Entity]:
    """List entities, optionally only those of one project."""
    entities = controller.store.all()
    if project_id:
        entities = [entity for entity in entities if entity.project_id == project_id]

    logger.debug(f"Listed {len(entities)} entities" + (f" for project={project_id}" if project_id else ""))

    return entities


@router.get(
    "/{entity_id}",
    response_model=EntityRead,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def get_entity(
    entity_id: str,
    controller: ChecklistController = Depends(get_controller),
) -> EntityRead:
    """Get an entity with per-category and overall progress."""
    entity = controller.store.get(entity_id)
    if entity is None:
        raise NotFoundError("Entity", entity_id)

    return EntityRead(
        **entity.model_dump(),
        progress={
            category: category_progress(entity.categories.for_category(category))
            for category in Category
        },
        overall=overall_progress(entity),
    )


@router.delete(
    "/{entity_id}",
    response_model=ChecklistView,
    responses={status.HTTP_409_CONFLICT: {"model": ErrorResponse}},
)
async def delete_entity(
    entity_id: str,
    confirm: bool = False,
    controller: ChecklistController = Depends(get_controller),
) -> ChecklistView:
    """Delete an entity. Requires `confirm=true`."""
    return await controller.delete_entity(entity_id, confirm=confirm)


@router.post(
    "/{entity_id}/categories/{category}/items",
    response_model=ChecklistView,
    status_code=status.HTTP_201_CREATED,
)
async def add_custom_item(
    entity_id: str,
    category: Category,
    item_in: ItemCreate,
    response: Response,
    controller: ChecklistController = Depends(get_controller),
) -> ChecklistView:
    """
    Append a custom item to a category.

    Answers 200 with the unchanged view when the entity does not exist.
    """
    if controller.store.get(entity_id) is None:
        response.status_code = status.HTTP_200_OK
    return await controller.add_custom_item(entity_id, category, item_in.label)


@router.post("/{entity_id}/categories/{category}/items/{item_id}/toggle", response_model=ChecklistView)
async def toggle_item(
    entity_id: str,
    category: Category,
    item_id: str,
    controller: ChecklistController = Depends(get_controller),
) -> ChecklistView:
    """Flip an item's checked state."""
    return await controller.toggle_item(entity_id, category, item_id)


@router.delete("/{entity_id}/categories/{category}/items/{item_id}", response_model=ChecklistView)
async def delete_custom_item(
    entity_id: str,
    category: Category,
    item_id: str,
    controller: ChecklistController = Depends(get_controller),
) -> ChecklistView:
    """Remove a custom item. Predefined items are left in place."""
    return await controller.delete_custom_item(entity_id, category, item_id)
