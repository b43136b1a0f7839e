"""Persisted bearer token model."""

from datetime import datetime
from sqlalchemy import Column, String, DateTime

from vipudev.core.storage.database import Base


class AuthSession(Base):
    """Bearer token issued at login, used by the database session store."""

    __tablename__ = "auth_sessions"

    token = Column(String(64), primary_key=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    expires_at = Column(DateTime, nullable=True)  # NULL never expires
