"""Prompt assembly for the VipuDev.AI assistant."""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from vipudev.core.storage import repository

logger = logging.getLogger(__name__)

MEMORY_MESSAGE_LIMIT = 20

ASSISTANT_SYSTEM_PROMPT = """
You are VipuDevAI, a senior full-stack engineer and software architect working
as a developer assistant inside the VipuDev.AI dashboard.

Rules:
- Always give a concrete, working answer. When information is missing, state
  the most likely assumption and continue with it.
- Prefer complete, runnable code and step-by-step fixes over general advice.
- Structure answers with headings, bullet points and full code blocks.
""".strip()


async def load_memory(db: AsyncSession, limit: int = MEMORY_MESSAGE_LIMIT) -> str:
    """Render recent chat history as ``role: content`` lines; empty on storage errors."""
    try:
        history = await repository.list_chat_messages(db, limit=limit)
    except SQLAlchemyError:
        logger.warning("Could not load chat memory; continuing without it", exc_info=True)
        return ""
    return "\n".join(f"{message.role.value}: {message.content}" for message in history)


async def build_assistant_messages(
    db: AsyncSession,
    messages: list[dict[str, str]],
    code_context: Optional[str] = None,
) -> list[dict[str, str]]:
    """Prepend the persona prompt, chat memory and optional code context."""
    memory = await load_memory(db)
    built = [
        {
            "role": "system",
            "content": f"{ASSISTANT_SYSTEM_PROMPT}\n\nMEMORY:\n{memory or '(none yet)'}",
        }
    ]
    if code_context:
        built.append(
            {
                "role": "user",
                "content": f"Here is the current code/project context:\n{code_context}",
            }
        )
    return built + list(messages)
