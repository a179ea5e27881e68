"""
Checklist controller.

Owns the entity store and the selection state. Each action runs to
completion under a single lock: mutate in memory, persist the whole store,
then render the view.
"""

import asyncio
from typing import Optional

from fastapi import Request

from checklist.config import Settings
from checklist.logging_config import get_logger
from checklist.schemas.entity import Category
from checklist.schemas.view import ChecklistView
from checklist.services import items as item_editor
from checklist.services import lifecycle, selection
from checklist.services.selection import AppState
from checklist.services.store import ChecklistStore
from checklist.services.view import render

logger = get_logger(__name__)

SAVE_WARNING = "Error saving data. Your changes may not persist."


class ChecklistController:
    def __init__(self, store: ChecklistStore, settings: Settings):
        self.store = store
        self.settings = settings
        self.state = AppState()
        self._lock = asyncio.Lock()

    async def startup(self) -> ChecklistView:
        """Reload everything from the persisted store with a fresh selection."""
        async with self._lock:
            await self.store.load()
            self.state = AppState()
            return self._render()

    def _render(self, warnings: Optional[list[str]] = None) -> ChecklistView:
        return render(
            self.state,
            self.store.entities,
            entity_kind=self.settings.entity_kind,
            require_project=self.settings.require_project,
            warnings=warnings,
        )

    async def _persist(self) -> list[str]:
        if await self.store.save():
            return []
        logger.warning("Store write failed; keeping in-memory state for this session")
        return [SAVE_WARNING]

    async def view(self) -> ChecklistView:
        async with self._lock:
            return self._render()

    # =========================================================================
    # Entities
    # =========================================================================

    async def create_entity(self, name: str, project_id: Optional[str]) -> ChecklistView:
        """Create, persist and select a new entity."""
        async with self._lock:
            entity = lifecycle.create_entity(
                name,
                project_id,
                kind=self.settings.entity_kind,
                require_project=self.settings.require_project,
            )
            self.store.upsert(entity)
            warnings = await self._persist()

            selection.apply_handoff(self.state, selection.handoff_for(entity))

            logger.info(
                f"Created {self.settings.entity_kind}: id={entity.id} "
                f"name='{entity.name}' project={entity.project_id}"
            )
            return self._render(warnings)

    async def delete_entity(self, entity_id: str, confirm: bool = False) -> ChecklistView:
        """Delete an entity after confirmation; unknown ids are ignored."""
        async with self._lock:
            entity = self.store.get(entity_id)
            if entity is None:
                logger.debug(f"Delete ignored, no entity {entity_id}")
                return self._render()

            lifecycle.ensure_delete_confirmed(entity, confirm)

            logger.info(f"Deleting {self.settings.entity_kind} {entity_id}: '{entity.name}'")
            self.store.remove(entity_id)
            warnings = await self._persist()
            selection.forget(self.state, entity_id)
            return self._render(warnings)

    # =========================================================================
    # Selection & filter
    # =========================================================================

    async def select_entity(self, entity_id: Optional[str]) -> ChecklistView:
        async with self._lock:
            selection.select(self.state, self.store.entities, entity_id)
            return self._render()

    async def set_filter(self, project_filter: str) -> ChecklistView:
        async with self._lock:
            selection.set_filter(self.state, project_filter)
            logger.debug(f"Project filter set to '{project_filter}'")
            return self._render()

    # =========================================================================
    # Items
    # =========================================================================

    async def toggle_item(self, entity_id: str, category: Category, item_id: str) -> ChecklistView:
        async with self._lock:
            entity = self.store.get(entity_id)
            if entity is None or item_editor.toggle_item(entity, category, item_id) is None:
                return self._render()
            return self._render(await self._persist())

    async def add_custom_item(self, entity_id: str, category: Category, label: str) -> ChecklistView:
        async with self._lock:
            entity = self.store.get(entity_id)
            if entity is None:
                return self._render()

            item = item_editor.add_custom_item(entity, category, label)
            logger.info(f"Added custom item {item.id} to {entity_id}/{category.value}")
            return self._render(await self._persist())

    async def delete_custom_item(self, entity_id: str, category: Category, item_id: str) -> ChecklistView:
        async with self._lock:
            entity = self.store.get(entity_id)
            if entity is None or not item_editor.delete_custom_item(entity, category, item_id):
                return self._render()

            logger.info(f"Deleted custom item {item_id} from {entity_id}/{category.value}")
            return self._render(await self._persist())


def get_controller(request: Request) -> ChecklistController:
    """Dependency returning the controller created at startup."""
    return request.app.state.controller
