"""Code execution log routes."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from vipudev.core.storage import repository
from vipudev.core.storage.database import get_db
from vipudev.models.schemas import (
    CodeExecutionCreate,
    CodeExecutionEnvelope,
    CodeExecutionListResponse,
    CodeExecutionResponse,
)

router = APIRouter(prefix="/executions", tags=["executions"])


@router.get("", response_model=CodeExecutionListResponse)
async def list_executions(
    limit: int = Query(repository.DEFAULT_EXECUTION_LIMIT, ge=1, le=500),
    db: AsyncSession = Depends(get_db),
):
    """List recorded executions, newest first."""
    executions = await repository.list_code_executions(db, limit=limit)
    return CodeExecutionListResponse(
        executions=[CodeExecutionResponse.model_validate(e) for e in executions]
    )


@router.post("", response_model=CodeExecutionEnvelope, status_code=status.HTTP_201_CREATED)
async def create_execution(
    execution_data: CodeExecutionCreate,
    db: AsyncSession = Depends(get_db),
):
    execution = await repository.create_code_execution(db, execution_data.model_dump())
    return CodeExecutionEnvelope(execution=CodeExecutionResponse.model_validate(execution))
