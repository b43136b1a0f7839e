"""Tests for chat, execution, config and session models."""

from datetime import datetime

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from vipudev.models.database import (
    AuthSession,
    ChatMessage,
    CodeExecution,
    MessageRole,
    UserConfig,
    SINGLETON_CONFIG_ID,
)


@pytest.mark.unit
class TestChatMessageModel:
    @pytest.mark.asyncio
    async def test_create_message(self, db_session):
        message = ChatMessage(role=MessageRole.ASSISTANT, content="Hello!")
        db_session.add(message)
        await db_session.commit()
        await db_session.refresh(message)

        assert message.role == MessageRole.ASSISTANT
        assert message.code_context is None
        assert message.created_at is not None

    def test_role_values(self):
        assert [role.value for role in MessageRole] == ["user", "assistant", "system"]


@pytest.mark.unit
class TestCodeExecutionModel:
    @pytest.mark.asyncio
    async def test_exit_code_optional(self, db_session):
        execution = CodeExecution(language="node", code="console.log(1)", stdout="1\n")
        db_session.add(execution)
        await db_session.commit()
        await db_session.refresh(execution)

        assert execution.exit_code is None
        assert execution.stdout == "1\n"

    @pytest.mark.asyncio
    async def test_code_required(self, db_session):
        db_session.add(CodeExecution(language="node"))

        with pytest.raises(IntegrityError):
            await db_session.commit()


@pytest.mark.unit
class TestUserConfigModel:
    @pytest.mark.asyncio
    async def test_default_id(self, db_session):
        config = UserConfig(backend_url="http://localhost:5000")
        db_session.add(config)
        await db_session.commit()

        result = await db_session.execute(select(UserConfig))
        assert result.scalar_one().id == SINGLETON_CONFIG_ID


@pytest.mark.unit
class TestAuthSessionModel:
    @pytest.mark.asyncio
    async def test_expires_at_nullable(self, db_session):
        session = AuthSession(token="a" * 64)
        db_session.add(session)
        await db_session.commit()
        await db_session.refresh(session)

        assert session.expires_at is None
        assert isinstance(session.created_at, datetime)
