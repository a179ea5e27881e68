"""
Pytest configuration and fixtures for checklist tests.
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlmodel import SQLModel

from checklist.config import Settings
from checklist.controller import ChecklistController, get_controller
from checklist.main import app
from checklist.models import StorageSlot  # noqa: F401
from checklist.services.store import ChecklistStore


STORE_KEY = "devChecklistTasks"


@pytest.fixture
def settings() -> Settings:
    return Settings(store_key=STORE_KEY, entity_kind="task", require_project=True)


@pytest_asyncio.fixture(scope="function")
async def test_engine(tmp_path):
    """A fresh SQLite database per test."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'checklist.db'}", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(test_engine):
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def store(session_maker) -> ChecklistStore:
    return ChecklistStore(session_maker, STORE_KEY)


@pytest_asyncio.fixture(scope="function")
async def controller(store, settings) -> ChecklistController:
    controller = ChecklistController(store, settings)
    await controller.startup()
    return controller


@pytest_asyncio.fixture(scope="function")
async def client(controller):
    """Async test client bound to the per-test controller."""
    app.dependency_overrides[get_controller] = lambda: controller

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def broken_storage(test_engine):
    """Drop the slot table so every further read and write fails."""
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
