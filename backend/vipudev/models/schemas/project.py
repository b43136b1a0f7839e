"""Project schemas for API validation."""

from datetime import datetime
from pydantic import Field

from vipudev.models.schemas.base import CamelModel


class ProjectFile(CamelModel):
    """A single file held inside a project."""

    path: str = Field(..., min_length=1, max_length=500)
    content: str
    language: str | None = None


class ProjectBase(CamelModel):
    """Base project schema."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None


class ProjectCreate(ProjectBase):
    """Schema for creating a project."""

    files: list[ProjectFile] = Field(default_factory=list)


class ProjectUpdate(CamelModel):
    """Schema for updating a project. `files` replaces the stored list."""

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    files: list[ProjectFile] | None = None


class ProjectResponse(ProjectBase):
    """Schema for project response."""

    id: str
    files: list[ProjectFile]
    created_at: datetime
    updated_at: datetime


class ProjectEnvelope(CamelModel):
    project: ProjectResponse


class ProjectListResponse(CamelModel):
    """Schema for project list response."""

    projects: list[ProjectResponse]
