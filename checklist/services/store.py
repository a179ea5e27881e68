"""
Whole-blob entity store.

The in-memory mapping is authoritative for the running process and is
mirrored to a single key/value slot. Loads and saves always move the full
mapping; there are no partial writes.
"""

from typing import Optional

from pydantic import TypeAdapter
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from checklist.logging_config import get_logger
from checklist.models import StorageSlot, utcnow
from checklist.schemas.entity import Entity

logger = get_logger(__name__)

_store_adapter = TypeAdapter(dict[str, Entity])


def serialize(entities: dict[str, Entity]) -> str:
    """Serialize the mapping using the persisted (aliased) field names."""
    return _store_adapter.dump_json(entities, by_alias=True).decode("utf-8")


def deserialize(blob: str | bytes) -> dict[str, Entity]:
    """
    Parse a stored blob.

    Raises:
        pydantic.ValidationError: if the blob is not valid JSON or does not
            match the entity layout.
    """
    return _store_adapter.validate_json(blob)


class ChecklistStore:
    """Entity mapping mirrored to the slot named `key`."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession], key: str):
        self._session_maker = session_maker
        self.key = key
        self.entities: dict[str, Entity] = {}

    async def load(self) -> dict[str, Entity]:
        """
        Replace the in-memory mapping with the stored one.

        A missing, unreadable or malformed slot yields an empty store.
        """
        try:
            async with self._session_maker() as session:
                slot = await session.get(StorageSlot, self.key)
        except SQLAlchemyError:
            logger.exception(f"Error reading slot '{self.key}', starting empty")
            self.entities = {}
            return self.entities

        if slot is None:
            logger.debug(f"Slot '{self.key}' is empty")
            self.entities = {}
            return self.entities

        try:
            self.entities = deserialize(slot.value)
        except ValueError:
            logger.exception(f"Error loading entities from slot '{self.key}', resetting")
            self.entities = {}
            return self.entities

        logger.info(f"Loaded {len(self.entities)} entities from slot '{self.key}'")
        return self.entities

    async def save(self) -> bool:
        """
        Write the full mapping to the slot.

        Returns False if the write failed; the in-memory mapping is left
        untouched either way.
        """
        blob = serialize(self.entities)
        async with self._session_maker() as session:
            try:
                slot = await session.get(StorageSlot, self.key)
                if slot is None:
                    session.add(StorageSlot(key=self.key, value=blob))
                else:
                    slot.value = blob
                    slot.updated_at = utcnow()
                await session.commit()
            except SQLAlchemyError:
                await session.rollback()
                logger.exception(f"Error saving entities to slot '{self.key}'")
                return False

        logger.debug(f"Saved {len(self.entities)} entities ({len(blob)} bytes)")
        return True

    def get(self, entity_id: str) -> Optional[Entity]:
        return self.entities.get(entity_id)

    def all(self) -> list[Entity]:
        return list(self.entities.values())

    def upsert(self, entity: Entity) -> None:
        self.entities[entity.id] = entity

    def remove(self, entity_id: str) -> Optional[Entity]:
        return self.entities.pop(entity_id, None)

    async def clear(self) -> bool:
        """Drop every entity and persist the empty mapping."""
        self.entities = {}
        return await self.save()
