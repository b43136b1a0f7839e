"""Project database model."""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Text, JSON

from vipudev.core.storage.database import Base


class Project(Base):
    """A coding project with its files stored inline."""

    __tablename__ = "projects"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    files = Column(JSON, default=list, nullable=False)  # [{path, content, language}, ...]
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
