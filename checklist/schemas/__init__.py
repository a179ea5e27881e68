from checklist.schemas.entity import (
    Category,
    Item,
    Categories,
    Entity,
    EntityCreate,
    ItemCreate,
    SelectionUpdate,
    FilterUpdate,
)
from checklist.schemas.view import (
    Progress,
    OverallProgress,
    Option,
    ItemView,
    CategoryPanel,
    CreationDialog,
    ChecklistView,
    EntityRead,
    CatalogProjectRead,
    CatalogTemplateRead,
)

__all__ = [
    "Category",
    "Item",
    "Categories",
    "Entity",
    "EntityCreate",
    "ItemCreate",
    "SelectionUpdate",
    "FilterUpdate",
    "Progress",
    "OverallProgress",
    "Option",
    "ItemView",
    "CategoryPanel",
    "CreationDialog",
    "ChecklistView",
    "EntityRead",
    "CatalogProjectRead",
    "CatalogTemplateRead",
]
