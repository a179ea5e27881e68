"""
Entity lifecycle: creation from the catalog templates and confirmed deletion.
"""

import time
import uuid
from datetime import datetime, timezone
from typing import Optional

from checklist.catalog import combined_labels, get_project
from checklist.exceptions import ConfirmationRequiredError, ValidationError
from checklist.logging_config import get_logger
from checklist.schemas.entity import Categories, Category, Entity, Item

logger = get_logger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


def _suffix() -> str:
    return uuid.uuid4().hex[:7]


def new_entity_id(kind: str) -> str:
    """`<kind>_<epoch ms>_<suffix>`; the timestamp keeps ids sortable by creation."""
    return f"{kind}_{_now_ms()}_{_suffix()}"


def new_custom_item_id() -> str:
    return f"custom_{_now_ms()}_{_suffix()}"


def build_category_items(labels: list[str]) -> list[Item]:
    """Turn template labels into unchecked predefined items with fresh ids."""
    prefix = f"item_{_now_ms()}_{_suffix()}"
    return [
        Item(id=f"{prefix}_{index}", label=label, checked=False, is_predefined=True)
        for index, label in enumerate(labels)
    ]


def create_entity(
    name: str,
    project_id: Optional[str],
    kind: str = "task",
    require_project: bool = True,
) -> Entity:
    """
    Build a new entity seeded from the catalog.

    Each category gets the general template followed by the overrides of
    `project_id`. Nothing is persisted here.

    Raises:
        ValidationError: empty name, missing project (when required) or a
            project id that is not in the catalog.
    """
    name = (name or "").strip()
    project_id = (project_id or "").strip() or None

    if not name:
        raise ValidationError(f"Please enter a {kind} name", field="name")
    if project_id is None and require_project:
        raise ValidationError("Please select a project", field="project_id")
    if project_id is not None and get_project(project_id) is None:
        raise ValidationError(f"Unknown project: {project_id}", field="project_id")

    categories = Categories(
        **{
            category.value: build_category_items(combined_labels(category, project_id))
            for category in Category
        }
    )
    entity = Entity(
        id=new_entity_id(kind),
        name=name,
        project_id=project_id,
        created_at=datetime.now(timezone.utc),
        categories=categories,
    )

    logger.debug(
        f"Built {kind} {entity.id} with {len(categories.all_items())} predefined items"
    )
    return entity


def ensure_delete_confirmed(entity: Entity, confirm: bool) -> None:
    """Deletion is irreversible and must be confirmed explicitly."""
    if not confirm:
        raise ConfirmationRequiredError(entity.id, entity.name)
