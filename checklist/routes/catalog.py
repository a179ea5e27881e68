"""
Read-only catalog routes.
"""

from fastapi import APIRouter

from checklist.catalog import PROJECTS, combined_labels, get_project
from checklist.exceptions import NotFoundError
from checklist.schemas import CatalogProjectRead, CatalogTemplateRead, Category

router = APIRouter()


@router.get("/projects", response_model=list[CatalogProjectRead])
async def list_catalog_projects() -> list[CatalogProjectRead]:
    """List the selectable projects."""
    return [
        CatalogProjectRead(id=project.id, name=project.name, color=project.color)
        for project in PROJECTS
    ]


@router.get("/projects/{project_id:path}/template", response_model=CatalogTemplateRead)
async def get_catalog_template(project_id: str) -> CatalogTemplateRead:
    """Item labels a new entity of this project starts with."""
    if get_project(project_id) is None:
        raise NotFoundError("Project", project_id)

    return CatalogTemplateRead(
        project_id=project_id,
        categories={category: combined_labels(category, project_id) for category in Category},
    )
