"""User configuration database model."""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, LargeBinary

from vipudev.core.storage.database import Base

SINGLETON_CONFIG_ID = 1


class UserConfig(Base):
    """Singleton dashboard configuration; always stored under id 1."""

    __tablename__ = "user_config"

    id = Column(Integer, primary_key=True, default=SINGLETON_CONFIG_ID)
    backend_url = Column(String(500), nullable=True)
    encrypted_api_key = Column(LargeBinary, nullable=True)  # Fernet-encrypted
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
