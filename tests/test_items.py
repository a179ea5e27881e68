"""
Item editing: toggle, add and delete custom items.
"""

import pytest

from checklist.exceptions import ValidationError
from checklist.schemas import Category
from checklist.services.items import add_custom_item, delete_custom_item, toggle_item
from checklist.services.lifecycle import create_entity


@pytest.fixture
def entity():
    return create_entity("Login Flow", "wts")


class TestToggle:

    def test_double_toggle_restores_state(self, entity):
        before = entity.model_dump()
        item_id = entity.categories.uiux[2].id

        assert toggle_item(entity, Category.UIUX, item_id).checked is True
        assert toggle_item(entity, Category.UIUX, item_id).checked is False

        assert entity.model_dump() == before

    def test_toggle_only_touches_target(self, entity):
        item_id = entity.categories.functionality[1].id
        toggle_item(entity, Category.FUNCTIONALITY, item_id)

        checked = [item.id for item in entity.categories.all_items() if item.checked]
        assert checked == [item_id]

    def test_unknown_item_is_noop(self, entity):
        before = entity.model_dump()
        assert toggle_item(entity, Category.UIUX, "missing") is None
        assert entity.model_dump() == before

    def test_wrong_category_is_noop(self, entity):
        item_id = entity.categories.uiux[0].id
        assert toggle_item(entity, Category.RESPONSIVE, item_id) is None


class TestCustomItems:

    def test_add_appends_custom_item(self, entity):
        total = len(entity.categories.responsive)
        item = add_custom_item(entity, Category.RESPONSIVE, "  Works on smart TVs ")

        assert entity.categories.responsive[-1] is item
        assert item.label == "Works on smart TVs"
        assert item.checked is False
        assert item.is_predefined is False
        assert item.id.startswith("custom_")
        assert len(entity.categories.responsive) == total + 1

    @pytest.mark.parametrize("label", ["", "   "])
    def test_empty_label_rejected(self, entity, label):
        before = entity.model_dump()
        with pytest.raises(ValidationError) as exc_info:
            add_custom_item(entity, Category.UIUX, label)
        assert exc_info.value.message == "Please enter an item description"
        assert entity.model_dump() == before

    def test_delete_custom_removes_exactly_one(self, entity):
        keep = add_custom_item(entity, Category.UIUX, "Keep me")
        drop = add_custom_item(entity, Category.UIUX, "Drop me")
        total = len(entity.categories.uiux)

        assert delete_custom_item(entity, Category.UIUX, drop.id) is True

        ids = [item.id for item in entity.categories.uiux]
        assert len(ids) == total - 1
        assert drop.id not in ids
        assert keep.id in ids

    def test_predefined_item_cannot_be_deleted(self, entity):
        before = entity.model_dump()
        predefined_id = entity.categories.uiux[0].id

        assert delete_custom_item(entity, Category.UIUX, predefined_id) is False
        assert entity.model_dump() == before

    def test_delete_unknown_is_noop(self, entity):
        assert delete_custom_item(entity, Category.UIUX, "missing") is False
