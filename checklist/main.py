"""
Checklist - QA checklist tracker with per-project item templates.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from checklist.config import get_settings
from checklist.controller import ChecklistController
from checklist.database import async_session_maker, init_db
from checklist.exceptions import register_exception_handlers
from checklist.logging_config import setup_logging, get_logger
from checklist.routes import catalog, entities, workspace
from checklist.services.store import ChecklistStore

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    settings = get_settings()
    logger.info("Starting Checklist API...")
    await init_db()
    logger.info("Database initialized")

    controller = ChecklistController(
        ChecklistStore(async_session_maker, settings.store_key),
        settings,
    )
    await controller.startup()
    app.state.controller = controller
    yield
    logger.info("Shutting down Checklist API...")


app = FastAPI(
    title="Checklist",
    description="QA checklist tracker with per-project item templates",
    version="0.1.0",
    lifespan=lifespan,
)

# Register custom exception handlers
register_exception_handlers(app)

# Include routers
app.include_router(workspace.router, tags=["Workspace"])
app.include_router(entities.router, prefix="/entities", tags=["Entities"])
app.include_router(catalog.router, prefix="/catalog", tags=["Catalog"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
