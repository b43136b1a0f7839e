"""Shared FastAPI dependencies."""

from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from vipudev.core.llm.provider import LLMProvider, create_llm_provider
from vipudev.core.security.sessions import SessionStore, get_session_store

# Same response for every auth failure
_AUTH_FAILED = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Invalid token",
    headers={"WWW-Authenticate": "Bearer"},
)

LLM_NOT_CONFIGURED = "OpenAI API key not configured on server"


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token of a ``Bearer <token>`` header, or None."""
    if not authorization:
        return None
    parts = authorization.split(" ", maxsplit=1)
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1].strip():
        return None
    return parts[1].strip()


async def require_session(
    authorization: Optional[str] = Header(default=None),
    store: SessionStore = Depends(get_session_store),
) -> str:
    """Reject the request with 401 unless it carries a valid bearer token."""
    token = extract_bearer_token(authorization)
    if token is None or not await store.is_valid(token):
        raise _AUTH_FAILED
    return token


def get_llm_provider() -> Optional[LLMProvider]:
    """The configured hosted LLM adapter, or None without a server credential."""
    return create_llm_provider()


def require_llm_provider(
    provider: Optional[LLMProvider] = Depends(get_llm_provider),
) -> LLMProvider:
    if provider is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=LLM_NOT_CONFIGURED,
        )
    return provider
