"""Assistant, image generation and ZIP analysis schemas."""

from typing import Literal
from pydantic import Field

from vipudev.models.schemas.base import CamelModel


class AssistantMessage(CamelModel):
    """A message forwarded to the hosted LLM."""

    role: Literal["user", "assistant", "system"]
    content: str


class AssistantChatRequest(CamelModel):
    """Schema for an assistant chat turn."""

    messages: list[AssistantMessage] = Field(default_factory=list)
    code_context: str | None = None


class AssistantChatResponse(CamelModel):
    reply: str


class AnalyzeZipResponse(CamelModel):
    analysis: str
    sampled_files: int


class ImageGenerationRequest(CamelModel):
    prompt: str = Field(..., min_length=1, max_length=4000)


class ImageGenerationResponse(CamelModel):
    url: str | None
