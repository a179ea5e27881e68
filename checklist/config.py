"""
Application settings for the checklist service.

Values are read from the environment (prefix ``CHECKLIST_``) or a local
``.env`` file.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CHECKLIST_",
        env_file=".env",
        extra="ignore",
    )

    database_url: str = "sqlite+aiosqlite:///./checklist.db"
    debug: bool = False
    log_level: Optional[str] = None
    json_logs: bool = False

    # Name of the key/value slot holding the serialized store
    store_key: str = "devChecklistTasks"

    # "task" entities link to a catalog project, "project" entities may not
    entity_kind: Literal["task", "project"] = "task"
    require_project: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()
