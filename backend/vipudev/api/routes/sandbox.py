"""Code execution routes: host snippets and containerized projects."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from vipudev.core.sandbox import (
    HostRunner,
    SandboxError,
    SandboxRunner,
    get_host_runner,
    get_sandbox_runner,
)
from vipudev.core.storage.workspace import UnsafePathError
from vipudev.models.schemas import (
    RunCodeRequest,
    RunCodeResponse,
    RunProjectRequest,
    RunProjectResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sandbox"])


@router.post("/run", response_model=RunCodeResponse)
async def run_code(
    request: RunCodeRequest,
    runner: HostRunner = Depends(get_host_runner),
):
    """Run a single Python or JavaScript snippet on the host."""
    try:
        result = await runner.run(request.code, request.language)
    except Exception:
        logger.exception("Host run failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Execution failed on backend",
        )

    return RunCodeResponse(
        stdout=result.stdout,
        stderr=result.stderr,
        exit_code=result.exit_code,
        timed_out=result.timed_out,
    )


@router.post("/run-project", response_model=RunProjectResponse)
async def run_project(
    request: RunProjectRequest,
    runner: SandboxRunner = Depends(get_sandbox_runner),
):
    """Run a multi-file project in an isolated container."""
    try:
        result = await runner.run_project(
            [(f.path, f.content) for f in request.files],
            language=request.language,
            command=request.command,
        )
    except UnsafePathError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except SandboxError as e:
        logger.exception("Sandbox run failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
    except Exception:
        logger.exception("Sandbox run failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to run project in Docker. Ensure Docker is installed and accessible.",
        )

    return RunProjectResponse(
        stdout=result.stdout,
        stderr=result.stderr,
        exit_code=result.exit_code,
        image_used=result.image_used,
        command_run=result.command_run,
        timed_out=result.timed_out,
    )
