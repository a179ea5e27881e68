"""
Item editing within one category of an entity.

Unknown item ids are ignored rather than reported.
"""

from typing import Optional

from checklist.exceptions import ValidationError
from checklist.schemas.entity import Category, Entity, Item
from checklist.services.lifecycle import new_custom_item_id


def find_item(items: list[Item], item_id: str) -> Optional[Item]:
    return next((item for item in items if item.id == item_id), None)


def toggle_item(entity: Entity, category: Category, item_id: str) -> Optional[Item]:
    """Flip `checked` on the matching item. Returns it, or None if absent."""
    item = find_item(entity.categories.for_category(category), item_id)
    if item is not None:
        item.checked = not item.checked
    return item


def add_custom_item(entity: Entity, category: Category, label: str) -> Item:
    """
    Append a user-defined item to the end of the category.

    Raises:
        ValidationError: if the trimmed label is empty.
    """
    label = (label or "").strip()
    if not label:
        raise ValidationError("Please enter an item description", field="label")

    item = Item(id=new_custom_item_id(), label=label, checked=False, is_predefined=False)
    entity.categories.for_category(category).append(item)
    return item


def delete_custom_item(entity: Entity, category: Category, item_id: str) -> bool:
    """
    Remove a custom item.

    Predefined items are never removed; the call is refused silently.
    """
    items = entity.categories.for_category(category)
    for index, item in enumerate(items):
        if item.id == item_id:
            if item.is_predefined:
                return False
            del items[index]
            return True
    return False
