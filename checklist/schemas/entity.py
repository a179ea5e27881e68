from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """The three fixed checklist groupings every entity has."""
    UIUX = "uiux"
    FUNCTIONALITY = "functionality"
    RESPONSIVE = "responsive"


class Item(BaseModel):
    """A single checkbox row."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    label: str
    checked: bool = False
    is_predefined: bool = Field(default=False, alias="isPredefined")


class Categories(BaseModel):
    """
    Checklist items grouped by category.

    Exactly the three fixed keys are accepted; list order is display order.
    """
    model_config = ConfigDict(extra="forbid")

    uiux: list[Item]
    functionality: list[Item]
    responsive: list[Item]

    def for_category(self, category: Category) -> list[Item]:
        return getattr(self, Category(category).value)

    def all_items(self) -> list[Item]:
        return [*self.uiux, *self.functionality, *self.responsive]


class Entity(BaseModel):
    """
    A task (or project) record.

    Field aliases match the persisted layout: `projectId`, `created`,
    `isPredefined`.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    project_id: str | None = Field(default=None, alias="projectId")
    created_at: datetime = Field(alias="created")
    categories: Categories


class EntityCreate(BaseModel):
    """Schema for creating a new entity."""
    name: str = ""
    project_id: str | None = None


class ItemCreate(BaseModel):
    """Schema for adding a custom item."""
    label: str = ""


class SelectionUpdate(BaseModel):
    entity_id: str | None = None


class FilterUpdate(BaseModel):
    project_filter: str = "all"
