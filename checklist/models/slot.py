from datetime import datetime, timezone
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StorageSlot(SQLModel, table=True):
    """
    Durable key/value slot.

    Each slot holds one whole serialized blob; writers always replace the
    full value, there are no partial updates.
    """

    __tablename__ = "storage_slots"

    key: str = Field(primary_key=True)
    value: str
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
