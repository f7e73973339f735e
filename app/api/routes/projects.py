"""Projects — CRUD over the projects table.

Invariants:
    - Bodies are validated by ProjectWrite before the handler runs (no DB access on 400)
    - Each handler borrows exactly one pooled session and releases it on exit
    - Writes re-read the affected row inside the same transaction
    - Missing rows raise NotFoundError → 404 {"error": "Project not found"}
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError
from app.infrastructure.database import DatabaseSessionManager, get_db_manager
from app.models.project import Project
from app.schemas.project import ProjectResponse, ProjectWrite

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/projects", tags=["projects"])

PROJECT_DELETED_MESSAGE = "Project deleted successfully"

# Range of the projects.id INTEGER column (32-bit signed)
_ID_MIN, _ID_MAX = -(2**31), 2**31 - 1


def require_storable_id(project_id: int) -> None:
    """Ids the column cannot hold match no row: 404 without querying."""
    if not _ID_MIN <= project_id <= _ID_MAX:
        raise NotFoundError("Project", project_id)


async def get_project_or_404(
    project_id: int, db: AsyncSession,
) -> Project:
    require_storable_id(project_id)
    result = await db.execute(
        select(Project).where(Project.id == project_id),
    )
    project = result.scalar_one_or_none()
    if project is None:
        raise NotFoundError("Project", project_id)
    return project


@router.get("", response_model=list[ProjectResponse])
async def list_projects(
    manager: DatabaseSessionManager = Depends(get_db_manager),
):
    """All projects, newest first."""
    async with manager.session() as db:
        result = await db.execute(
            select(Project).order_by(
                Project.created_at.desc(), Project.id.desc(),
            ),
        )
        return [ProjectResponse.model_validate(p) for p in result.scalars()]


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: int,
    manager: DatabaseSessionManager = Depends(get_db_manager),
):
    async with manager.session() as db:
        project = await get_project_or_404(project_id, db)
        return ProjectResponse.model_validate(project)


@router.post(
    "", response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_project(
    body: ProjectWrite,
    manager: DatabaseSessionManager = Depends(get_db_manager),
):
    """Insert a project and return it as stored (id and created_at assigned by the DB)."""
    async with manager.session() as db:
        result = await db.execute(
            insert(Project).values(
                title=body.title,
                description=body.description,
                image_url=body.image_url,
            ).returning(Project.id),
        )
        project_id = result.scalar_one()
        project = await get_project_or_404(project_id, db)
        response = ProjectResponse.model_validate(project)
    logger.info("Project created", extra={"project_id": project_id})
    return response


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: int,
    body: ProjectWrite,
    manager: DatabaseSessionManager = Depends(get_db_manager),
):
    """Replace title, description and image_url. Never creates a row."""
    require_storable_id(project_id)
    async with manager.session() as db:
        result = await db.execute(
            update(Project)
            .where(Project.id == project_id)
            .values(
                title=body.title,
                description=body.description,
                image_url=body.image_url,
            )
            .execution_options(synchronize_session=False),
        )
        if result.rowcount == 0:
            raise NotFoundError("Project", project_id)
        project = await get_project_or_404(project_id, db)
        response = ProjectResponse.model_validate(project)
    logger.info("Project updated", extra={"project_id": project_id})
    return response


@router.delete("/{project_id}")
async def delete_project(
    project_id: int,
    manager: DatabaseSessionManager = Depends(get_db_manager),
):
    require_storable_id(project_id)
    async with manager.session() as db:
        result = await db.execute(
            delete(Project)
            .where(Project.id == project_id)
            .execution_options(synchronize_session=False),
        )
        if result.rowcount == 0:
            raise NotFoundError("Project", project_id)
    logger.info("Project deleted", extra={"project_id": project_id})
    return {"message": PROJECT_DELETED_MESSAGE}
