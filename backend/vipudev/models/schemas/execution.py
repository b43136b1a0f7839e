"""Code execution log schemas."""

from datetime import datetime
from pydantic import Field

from vipudev.models.schemas.base import CamelModel


class CodeExecutionCreate(CamelModel):
    """Schema for recording a code execution."""

    language: str = Field(..., min_length=1, max_length=50)
    code: str
    stdout: str | None = None
    stderr: str | None = None
    exit_code: int | None = None


class CodeExecutionResponse(CodeExecutionCreate):
    """Schema for code execution response."""

    id: str
    created_at: datetime


class CodeExecutionEnvelope(CamelModel):
    execution: CodeExecutionResponse


class CodeExecutionListResponse(CamelModel):
    executions: list[CodeExecutionResponse]
