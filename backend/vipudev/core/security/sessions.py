"""Bearer token session stores.

A token is the only thing that authorizes a request: any valid token has full
access. Stores differ only in where membership lives and whether it survives a
restart.
"""

import logging
import secrets
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from vipudev.core.config import settings
from vipudev.models.database import AuthSession

logger = logging.getLogger(__name__)


def generate_token() -> str:
    """Return 32 random bytes, hex encoded."""
    return secrets.token_hex(32)


class SessionStore(ABC):
    """Issue, validate and revoke opaque bearer tokens."""

    def __init__(self, ttl_seconds: int = 0):
        # 0 keeps tokens valid until revoked
        self.ttl_seconds = ttl_seconds

    def _expiry(self, now: datetime) -> Optional[datetime]:
        if self.ttl_seconds <= 0:
            return None
        return now + timedelta(seconds=self.ttl_seconds)

    @abstractmethod
    async def issue(self) -> str:
        """Create and remember a new token."""

    @abstractmethod
    async def is_valid(self, token: str) -> bool:
        """Whether the token is known and not expired."""

    @abstractmethod
    async def revoke(self, token: str) -> None:
        """Forget the token. Unknown tokens are ignored."""


class InMemorySessionStore(SessionStore):
    """Process-lifetime store; every session is lost on restart."""

    def __init__(self, ttl_seconds: int = 0):
        super().__init__(ttl_seconds)
        self._tokens: dict[str, Optional[datetime]] = {}

    async def issue(self) -> str:
        token = generate_token()
        self._tokens[token] = self._expiry(datetime.utcnow())
        return token

    async def is_valid(self, token: str) -> bool:
        if token not in self._tokens:
            return False
        expires_at = self._tokens[token]
        if expires_at is not None and expires_at <= datetime.utcnow():
            self._tokens.pop(token, None)
            return False
        return True

    async def revoke(self, token: str) -> None:
        self._tokens.pop(token, None)

    def __len__(self) -> int:
        return len(self._tokens)


class DatabaseSessionStore(SessionStore):
    """Store backed by the auth_sessions table; survives restarts."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession], ttl_seconds: int = 0):
        super().__init__(ttl_seconds)
        self.session_factory = session_factory

    async def issue(self) -> str:
        token = generate_token()
        now = datetime.utcnow()
        async with self.session_factory() as db:
            db.add(AuthSession(token=token, created_at=now, expires_at=self._expiry(now)))
            await db.commit()
        return token

    async def is_valid(self, token: str) -> bool:
        async with self.session_factory() as db:
            result = await db.execute(select(AuthSession).where(AuthSession.token == token))
            session = result.scalar_one_or_none()
            if session is None:
                return False
            if session.expires_at is not None and session.expires_at <= datetime.utcnow():
                await db.delete(session)
                await db.commit()
                return False
            return True

    async def revoke(self, token: str) -> None:
        async with self.session_factory() as db:
            await db.execute(delete(AuthSession).where(AuthSession.token == token))
            await db.commit()


_session_store: Optional[SessionStore] = None


def create_session_store() -> SessionStore:
    """Build the store selected by SESSION_BACKEND."""
    backend = settings.session_backend.lower()
    if backend == "memory":
        return InMemorySessionStore(ttl_seconds=settings.session_ttl_seconds)
    if backend == "database":
        from vipudev.core.storage.database import AsyncSessionLocal

        return DatabaseSessionStore(AsyncSessionLocal, ttl_seconds=settings.session_ttl_seconds)
    raise ValueError(f"Unknown SESSION_BACKEND: {settings.session_backend}")


def get_session_store() -> SessionStore:
    """Get or create the process-wide session store."""
    global _session_store
    if _session_store is None:
        _session_store = create_session_store()
        logger.info("Using %s session store", type(_session_store).__name__)
    return _session_store
