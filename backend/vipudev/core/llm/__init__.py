"""LLM integration module."""

from vipudev.core.llm.provider import LLMProvider, LLMProviderError, create_llm_provider
from vipudev.core.llm.context import build_assistant_messages

__all__ = ["LLMProvider", "LLMProviderError", "create_llm_provider", "build_assistant_messages"]
