"""Record store operations for projects, chat history, executions and config.

Each function takes the request's AsyncSession and commits its own write.
Nothing here spans more than one entity.
"""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from vipudev.models.database import (
    ChatMessage,
    CodeExecution,
    Project,
    UserConfig,
    SINGLETON_CONFIG_ID,
)

DEFAULT_CHAT_LIMIT = 50
DEFAULT_EXECUTION_LIMIT = 20


# Projects
async def list_projects(db: AsyncSession) -> list[Project]:
    result = await db.execute(select(Project).order_by(Project.updated_at.desc()))
    return list(result.scalars().all())


async def get_project(db: AsyncSession, project_id: str) -> Optional[Project]:
    result = await db.execute(select(Project).where(Project.id == project_id))
    return result.scalar_one_or_none()


async def create_project(db: AsyncSession, data: dict[str, Any]) -> Project:
    project = Project(**data)
    db.add(project)
    await db.commit()
    await db.refresh(project)
    return project


async def update_project(
    db: AsyncSession, project_id: str, data: dict[str, Any]
) -> Optional[Project]:
    """Apply a partial update; `files`, when given, replaces the stored list."""
    project = await get_project(db, project_id)
    if project is None:
        return None

    for field, value in data.items():
        setattr(project, field, value)
    project.updated_at = datetime.utcnow()

    await db.commit()
    await db.refresh(project)
    return project


async def delete_project(db: AsyncSession, project_id: str) -> bool:
    result = await db.execute(delete(Project).where(Project.id == project_id))
    await db.commit()
    return result.rowcount > 0


# Chat history
async def list_chat_messages(db: AsyncSession, limit: int = DEFAULT_CHAT_LIMIT) -> list[ChatMessage]:
    """Return the newest `limit` messages, oldest first."""
    query = select(ChatMessage).order_by(ChatMessage.created_at.desc()).limit(limit)
    result = await db.execute(query)
    return list(reversed(result.scalars().all()))


async def create_chat_message(db: AsyncSession, data: dict[str, Any]) -> ChatMessage:
    message = ChatMessage(**data)
    db.add(message)
    await db.commit()
    await db.refresh(message)
    return message


async def clear_chat_history(db: AsyncSession) -> None:
    await db.execute(delete(ChatMessage))
    await db.commit()


# Code executions
async def list_code_executions(
    db: AsyncSession, limit: int = DEFAULT_EXECUTION_LIMIT
) -> list[CodeExecution]:
    query = select(CodeExecution).order_by(CodeExecution.created_at.desc()).limit(limit)
    result = await db.execute(query)
    return list(result.scalars().all())


async def create_code_execution(db: AsyncSession, data: dict[str, Any]) -> CodeExecution:
    execution = CodeExecution(**data)
    db.add(execution)
    await db.commit()
    await db.refresh(execution)
    return execution


# Config
async def get_config(db: AsyncSession) -> Optional[UserConfig]:
    result = await db.execute(select(UserConfig).where(UserConfig.id == SINGLETON_CONFIG_ID))
    return result.scalar_one_or_none()


def _insert_for(db: AsyncSession):
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert
    if dialect == "sqlite":
        return sqlite.insert
    raise ValueError(f"Config upsert is not supported on the {dialect!r} database dialect")


async def upsert_config(db: AsyncSession, values: dict[str, Any]) -> UserConfig:
    """Insert the singleton config row or update it, in one statement."""
    values = {**values, "updated_at": datetime.utcnow()}
    insert = _insert_for(db)
    stmt = insert(UserConfig).values(id=SINGLETON_CONFIG_ID, **values)
    stmt = stmt.on_conflict_do_update(index_elements=[UserConfig.id], set_=values)
    await db.execute(stmt)
    await db.commit()

    config = await get_config(db)
    # The identity map may hold a pre-upsert copy of the row
    await db.refresh(config)
    return config
