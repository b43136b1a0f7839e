"""Packaging and deployment helper routes."""

import logging

from fastapi import APIRouter, HTTPException, Response, status

from vipudev.core.deploy import deployment_instructions
from vipudev.core.storage.archive import ZIP_DOWNLOAD_NAME, archive_entry_name, build_code_zip
from vipudev.models.schemas import DeployRequest, DeployResponse, ZipCodeRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tools"])


@router.post("/zip-code")
async def zip_code(request: ZipCodeRequest):
    """Bundle one code file into a downloadable ZIP archive."""
    entry_name = archive_entry_name(request.language, request.filename)
    try:
        content = build_code_zip(request.code, entry_name)
    except Exception:
        logger.exception("ZIP creation failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create ZIP",
        )

    return Response(
        content=content,
        media_type="application/zip",
        headers={"Content-Disposition": f'attachment; filename="{ZIP_DOWNLOAD_NAME}"'},
    )


@router.post("/deploy", response_model=DeployResponse)
async def deploy(request: DeployRequest):
    """Return deployment instructions; nothing is deployed."""
    return DeployResponse(logs=deployment_instructions(request.platform))
