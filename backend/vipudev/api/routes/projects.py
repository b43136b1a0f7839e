"""Project API routes."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from vipudev.core.storage import repository
from vipudev.core.storage.database import get_db
from vipudev.models.schemas import (
    ProjectCreate,
    ProjectEnvelope,
    ProjectListResponse,
    ProjectResponse,
    ProjectUpdate,
    SuccessResponse,
)

router = APIRouter(prefix="/projects", tags=["projects"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")


@router.get("", response_model=ProjectListResponse)
async def list_projects(db: AsyncSession = Depends(get_db)):
    """List projects, most recently updated first."""
    projects = await repository.list_projects(db)
    return ProjectListResponse(projects=[ProjectResponse.model_validate(p) for p in projects])


@router.get("/{project_id}", response_model=ProjectEnvelope)
async def get_project(project_id: str, db: AsyncSession = Depends(get_db)):
    project = await repository.get_project(db, project_id)
    if not project:
        raise _not_found()
    return ProjectEnvelope(project=ProjectResponse.model_validate(project))


@router.post("", response_model=ProjectEnvelope, status_code=status.HTTP_201_CREATED)
async def create_project(project_data: ProjectCreate, db: AsyncSession = Depends(get_db)):
    project = await repository.create_project(db, project_data.model_dump())
    return ProjectEnvelope(project=ProjectResponse.model_validate(project))


@router.patch("/{project_id}", response_model=ProjectEnvelope)
async def update_project(
    project_id: str,
    project_data: ProjectUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a project. A `files` array replaces the stored one wholesale."""
    update_data = project_data.model_dump(exclude_unset=True)
    if update_data.get("name", "") is None or update_data.get("files", []) is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="name and files cannot be null",
        )

    project = await repository.update_project(db, project_id, update_data)
    if not project:
        raise _not_found()
    return ProjectEnvelope(project=ProjectResponse.model_validate(project))


@router.delete("/{project_id}", response_model=SuccessResponse)
async def delete_project(project_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a project permanently."""
    deleted = await repository.delete_project(db, project_id)
    if not deleted:
        raise _not_found()
    return SuccessResponse()
