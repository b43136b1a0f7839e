"""Database models."""

from vipudev.models.database.project import Project
from vipudev.models.database.message import ChatMessage, MessageRole
from vipudev.models.database.execution import CodeExecution
from vipudev.models.database.user_config import UserConfig, SINGLETON_CONFIG_ID
from vipudev.models.database.auth_session import AuthSession

__all__ = [
    "Project",
    "ChatMessage",
    "MessageRole",
    "CodeExecution",
    "UserConfig",
    "SINGLETON_CONFIG_ID",
    "AuthSession",
]
