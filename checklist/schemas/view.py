"""
View models.

Every mutating endpoint answers with a `ChecklistView` rendered from the
current application state, so clients only ever draw what they receive.
"""

from pydantic import BaseModel, computed_field

from checklist.schemas.entity import Category, Entity


class Progress(BaseModel):
    """Completion figures for a list of items."""
    completed: int
    total: int
    percentage: int

    @computed_field
    @property
    def bar_width(self) -> str:
        return f"{self.percentage}%"


class OverallProgress(Progress):
    @computed_field
    @property
    def text(self) -> str:
        """e.g. "75% (3/4 items)"."""
        return f"{self.percentage}% ({self.completed}/{self.total} items)"


class Option(BaseModel):
    """One entry of a dropdown."""
    value: str
    label: str
    selected: bool = False
    color: str | None = None


class ItemView(BaseModel):
    id: str
    label: str
    checked: bool
    deletable: bool


class CategoryPanel(BaseModel):
    category: Category
    title: str
    items: list[ItemView]
    progress: Progress

    @computed_field
    @property
    def progress_text(self) -> str:
        return f"{self.progress.completed} / {self.progress.total} completed"


class CreationDialog(BaseModel):
    """Defaults for the "new entity" dialog."""
    project_options: list[Option]
    default_project_id: str | None
    requires_project: bool


class ChecklistView(BaseModel):
    """Everything needed to draw the checklist screen."""
    entity_kind: str
    project_filter: str
    filter_options: list[Option]
    entity_options: list[Option]
    selected_entity_id: str | None
    can_delete: bool
    empty_state: bool
    panels: list[CategoryPanel]
    overall: OverallProgress | None
    creation: CreationDialog
    warnings: list[str] = []


class EntityRead(Entity):
    """An entity record together with its current progress."""
    progress: dict[Category, Progress]
    overall: OverallProgress


class CatalogProjectRead(BaseModel):
    id: str
    name: str
    color: str


class CatalogTemplateRead(BaseModel):
    """Item labels a new entity of this project starts with."""
    project_id: str
    categories: dict[Category, list[str]]
