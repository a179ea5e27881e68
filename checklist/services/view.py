"""
Render the checklist screen from application state.
"""

from typing import Mapping, Optional

from checklist.catalog import PROJECTS, get_project
from checklist.schemas.entity import Category, Entity
from checklist.schemas.view import (
    CategoryPanel,
    ChecklistView,
    CreationDialog,
    ItemView,
    Option,
)
from checklist.services.progress import category_progress, overall_progress
from checklist.services.selection import (
    ALL_PROJECTS,
    AppState,
    creation_default,
    visible_entities,
)

CATEGORY_TITLES = {
    Category.UIUX: "UI/UX",
    Category.FUNCTIONALITY: "Functionality",
    Category.RESPONSIVE: "Responsive",
}


def entity_label(entity: Entity) -> str:
    """Selector label, e.g. "Login Flow (WTS)"."""
    if entity.project_id is None:
        return entity.name
    project = get_project(entity.project_id)
    project_name = project.name if project else "Unknown Project"
    return f"{entity.name} ({project_name})"


def render_panel(category: Category, entity: Entity) -> CategoryPanel:
    items = entity.categories.for_category(category)
    return CategoryPanel(
        category=category,
        title=CATEGORY_TITLES[category],
        items=[
            ItemView(
                id=item.id,
                label=item.label,
                checked=item.checked,
                deletable=not item.is_predefined,
            )
            for item in items
        ],
        progress=category_progress(items),
    )


def render(
    state: AppState,
    entities: Mapping[str, Entity],
    entity_kind: str = "task",
    require_project: bool = True,
    warnings: Optional[list[str]] = None,
) -> ChecklistView:
    """Build the full view; panels are only present with an active entity."""
    active = entities.get(state.selected_id) if state.selected_id else None

    project_options = [
        Option(value=project.id, label=project.name, color=project.color)
        for project in PROJECTS
    ]
    filter_options = [
        Option(value=ALL_PROJECTS, label="All Projects", selected=state.project_filter == ALL_PROJECTS)
    ] + [
        option.model_copy(update={"selected": option.value == state.project_filter})
        for option in project_options
    ]
    entity_options = [
        Option(
            value=entity.id,
            label=entity_label(entity),
            selected=active is not None and entity.id == active.id,
        )
        for entity in visible_entities(entities.values(), state.project_filter)
    ]

    return ChecklistView(
        entity_kind=entity_kind,
        project_filter=state.project_filter,
        filter_options=filter_options,
        entity_options=entity_options,
        selected_entity_id=active.id if active else None,
        can_delete=active is not None,
        empty_state=active is None,
        panels=[render_panel(category, active) for category in Category] if active else [],
        overall=overall_progress(active) if active else None,
        creation=CreationDialog(
            project_options=project_options,
            default_project_id=creation_default(state),
            requires_project=require_project,
        ),
        warnings=list(warnings or []),
    )
