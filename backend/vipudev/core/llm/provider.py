"""LiteLLM-backed adapter for the hosted chat and image APIs."""

import logging
from typing import Any, Optional

from litellm import acompletion, aimage_generation

from vipudev.core.config import settings

logger = logging.getLogger(__name__)


class LLMProviderError(Exception):
    """The hosted API call failed."""


class LLMProvider:
    """Thin pass-through to a hosted LLM: no retry, no caching."""

    def __init__(
        self,
        provider: str = "openai",
        model: str = "gpt-4o-mini",
        api_key: Optional[str] = None,
        **config: Any,
    ):
        """
        Initialize the provider.

        Args:
            provider: LiteLLM provider id (openai, anthropic, azure, ...)
            model: Model name without provider prefix
            api_key: Server-side credential passed to every call
            **config: Default completion parameters (temperature, max_tokens, ...)
        """
        self.provider = provider
        self.model = model
        self.api_key = api_key
        self.config = config

    def _build_model_name(self, model: Optional[str] = None) -> str:
        model = model or self.model
        if self.provider == "openai" or "/" in model:
            return model
        return f"{self.provider}/{model}"

    async def generate(self, messages: list[dict[str, str]], stream: bool = False, **overrides: Any):
        """Call the chat completion API and return the raw LiteLLM response."""
        params = {**self.config, **overrides}
        try:
            return await acompletion(
                model=self._build_model_name(),
                messages=messages,
                api_key=self.api_key,
                stream=stream,
                **params,
            )
        except Exception as e:
            raise LLMProviderError(f"LLM generation failed: {e}") from e

    async def complete(self, messages: list[dict[str, str]], **overrides: Any) -> str:
        """Return the text of the first choice, or an empty string."""
        response = await self.generate(messages, stream=False, **overrides)
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    async def generate_image(
        self, prompt: str, model: Optional[str] = None, size: str = "1024x1024"
    ) -> Optional[str]:
        """Generate one image and return its URL."""
        try:
            response = await aimage_generation(
                prompt=prompt,
                model=self._build_model_name(model),
                api_key=self.api_key,
                size=size,
                n=1,
            )
        except Exception as e:
            raise LLMProviderError(f"Image generation failed: {e}") from e

        if not response.data:
            return None
        return response.data[0].url


def create_llm_provider() -> Optional[LLMProvider]:
    """Build the provider from settings; None when no credential is configured."""
    if not settings.llm_configured:
        return None
    return LLMProvider(
        provider=settings.llm_provider,
        model=settings.llm_model,
        api_key=settings.openai_api_key,
        temperature=settings.llm_temperature,
        max_tokens=settings.llm_max_tokens,
    )
