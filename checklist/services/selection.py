"""
Selection & filter state.

`AppState` tracks at most one selected entity and the active project filter
("all" or a catalog project id).
"""

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from checklist.catalog import PROJECTS, get_project
from checklist.exceptions import ValidationError
from checklist.schemas.entity import Entity

ALL_PROJECTS = "all"


@dataclass
class AppState:
    selected_id: Optional[str] = None
    project_filter: str = ALL_PROJECTS


@dataclass(frozen=True)
class Handoff:
    """Selection to restore right after an entity has been created."""
    entity_id: str
    project_filter: str


def visible_entities(entities: Iterable[Entity], project_filter: str) -> list[Entity]:
    """Entities shown in the selector, in insertion order."""
    if project_filter == ALL_PROJECTS:
        return list(entities)
    return [entity for entity in entities if entity.project_id == project_filter]


def set_filter(state: AppState, project_filter: str) -> None:
    """Switch the filter; the selection is always cleared."""
    if project_filter != ALL_PROJECTS and get_project(project_filter) is None:
        raise ValidationError(f"Unknown project filter: {project_filter}", field="project_filter")
    state.project_filter = project_filter
    state.selected_id = None


def select(state: AppState, entities: Mapping[str, Entity], entity_id: Optional[str]) -> bool:
    """
    Make `entity_id` the active entity, or clear the selection with None.

    Ids that are unknown or hidden by the current filter are ignored.
    Returns True when the selection changed.
    """
    if not entity_id:
        changed = state.selected_id is not None
        state.selected_id = None
        return changed

    entity = entities.get(entity_id)
    if entity is None or not visible_entities([entity], state.project_filter):
        return False

    changed = state.selected_id != entity_id
    state.selected_id = entity_id
    return changed


def forget(state: AppState, entity_id: str) -> bool:
    """Clear the selection if it points at `entity_id`."""
    if state.selected_id == entity_id:
        state.selected_id = None
        return True
    return False


def handoff_for(entity: Entity) -> Handoff:
    return Handoff(entity_id=entity.id, project_filter=entity.project_id or ALL_PROJECTS)


def apply_handoff(state: AppState, handoff: Handoff) -> None:
    state.project_filter = handoff.project_filter
    state.selected_id = handoff.entity_id


def creation_default(state: AppState) -> Optional[str]:
    """Project preselected in the creation dialog."""
    if state.project_filter != ALL_PROJECTS:
        return state.project_filter
    return PROJECTS[0].id if PROJECTS else None
