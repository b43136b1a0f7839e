"""Chat history schemas."""

from datetime import datetime

from vipudev.models.database.message import MessageRole
from vipudev.models.schemas.base import CamelModel


class ChatMessageCreate(CamelModel):
    """Schema for appending a chat message."""

    role: MessageRole
    content: str
    code_context: str | None = None


class ChatMessageResponse(ChatMessageCreate):
    """Schema for chat message response."""

    id: str
    created_at: datetime


class ChatMessageEnvelope(CamelModel):
    message: ChatMessageResponse


class ChatHistoryResponse(CamelModel):
    messages: list[ChatMessageResponse]
