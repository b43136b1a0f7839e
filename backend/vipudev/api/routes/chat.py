"""Chat history routes."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from vipudev.core.storage import repository
from vipudev.core.storage.database import get_db
from vipudev.models.schemas import (
    ChatHistoryResponse,
    ChatMessageCreate,
    ChatMessageEnvelope,
    ChatMessageResponse,
    SuccessResponse,
)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.get("", response_model=ChatHistoryResponse)
@router.get("/history", response_model=ChatHistoryResponse)
async def get_chat_history(
    limit: int = Query(repository.DEFAULT_CHAT_LIMIT, ge=1, le=500),
    db: AsyncSession = Depends(get_db),
):
    """Return the most recent messages in the order they were written."""
    messages = await repository.list_chat_messages(db, limit=limit)
    return ChatHistoryResponse(messages=[ChatMessageResponse.model_validate(m) for m in messages])


@router.post("", response_model=ChatMessageEnvelope, status_code=status.HTTP_201_CREATED)
async def create_chat_message(
    message_data: ChatMessageCreate,
    db: AsyncSession = Depends(get_db),
):
    message = await repository.create_chat_message(db, message_data.model_dump())
    return ChatMessageEnvelope(message=ChatMessageResponse.model_validate(message))


@router.delete("/history", response_model=SuccessResponse)
async def clear_chat_history(db: AsyncSession = Depends(get_db)):
    """Delete every stored chat message."""
    await repository.clear_chat_history(db)
    return SuccessResponse()
