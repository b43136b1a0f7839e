"""Code execution log model."""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Integer, Text

from vipudev.core.storage.database import Base


class CodeExecution(Base):
    """Append-only record of a code run reported by the client."""

    __tablename__ = "code_executions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    language = Column(String(50), nullable=False)
    code = Column(Text, nullable=False)
    stdout = Column(Text, nullable=True)
    stderr = Column(Text, nullable=True)
    exit_code = Column(Integer, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
