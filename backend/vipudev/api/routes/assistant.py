"""Hosted LLM routes: assistant chat, ZIP analysis and image generation."""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from vipudev.api.deps import require_llm_provider
from vipudev.core.config import settings
from vipudev.core.llm.context import build_assistant_messages
from vipudev.core.llm.provider import LLMProvider, LLMProviderError
from vipudev.core.storage.archive import ArchiveError, sample_zip_files
from vipudev.core.storage.database import get_db
from vipudev.models.schemas import (
    AnalyzeZipResponse,
    AssistantChatRequest,
    AssistantChatResponse,
    ImageGenerationRequest,
    ImageGenerationResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["assistant"])

ANALYZE_ZIP_INSTRUCTION = (
    "I uploaded a ZIP project. Analyze its structure, tech stack, potential issues, "
    "and suggest improvements."
)


@router.post("/assistant/chat", response_model=AssistantChatResponse)
async def assistant_chat(
    request: AssistantChatRequest,
    db: AsyncSession = Depends(get_db),
    provider: LLMProvider = Depends(require_llm_provider),
):
    """Answer a chat turn with recent history and optional code context prepended."""
    messages = await build_assistant_messages(
        db,
        [m.model_dump() for m in request.messages],
        code_context=request.code_context,
    )

    try:
        reply = await provider.complete(messages)
    except LLMProviderError:
        logger.exception("Assistant chat failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate assistant reply",
        )

    return AssistantChatResponse(reply=reply)


@router.post("/analyze-zip", response_model=AnalyzeZipResponse)
async def analyze_zip(
    file: UploadFile = File(...),
    db: AsyncSession = Depends(get_db),
    provider: LLMProvider = Depends(require_llm_provider),
):
    """Sample text files from an uploaded ZIP and ask the LLM to review them."""
    try:
        samples = sample_zip_files(
            file.file,
            max_files=settings.analyze_max_files,
            max_bytes=settings.analyze_max_file_bytes,
        )
    except ArchiveError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    finally:
        await file.close()

    messages = await build_assistant_messages(
        db,
        [
            {"role": "user", "content": ANALYZE_ZIP_INSTRUCTION},
            {"role": "user", "content": "\n\n".join(samples) or "(no readable text files found)"},
        ],
    )

    try:
        analysis = await provider.complete(messages, temperature=0.2)
    except LLMProviderError:
        logger.exception("ZIP analysis failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to analyze ZIP",
        )

    return AnalyzeZipResponse(analysis=analysis, sampled_files=len(samples))


@router.post("/generate-image", response_model=ImageGenerationResponse)
async def generate_image(
    request: ImageGenerationRequest,
    provider: LLMProvider = Depends(require_llm_provider),
):
    try:
        url = await provider.generate_image(
            request.prompt,
            model=settings.image_model,
            size=settings.image_size,
        )
    except LLMProviderError:
        logger.exception("Image generation failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Image generation failed",
        )

    return ImageGenerationResponse(url=url)
