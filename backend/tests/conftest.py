"""Shared pytest fixtures."""

import os
from datetime import datetime, timedelta

from cryptography.fernet import Fernet

# Configure the application before any vipudev module reads settings
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["MASTER_ENCRYPTION_KEY"] = Fernet.generate_key().decode()
os.environ["OPENAI_API_KEY"] = ""
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "admin123"
os.environ["SESSION_BACKEND"] = "memory"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import vipudev.models.database  # noqa: E402,F401
from vipudev.api.deps import get_llm_provider  # noqa: E402
from vipudev.core.llm.provider import LLMProvider  # noqa: E402
from vipudev.core.sandbox import SandboxRunner, get_sandbox_runner  # noqa: E402
from vipudev.core.security.credentials import (  # noqa: E402
    StaticCredentialVerifier,
    get_credential_verifier,
)
from vipudev.core.security.encryption import KeyEncryptionService, get_encryption_service  # noqa: E402
from vipudev.core.security.sessions import InMemorySessionStore, get_session_store  # noqa: E402
from vipudev.core.storage.database import Base, get_db  # noqa: E402
from vipudev.models.database import ChatMessage, MessageRole, Project  # noqa: E402


@pytest.fixture
async def db_engine():
    """In-memory SQLite engine with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(bind=db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    """Database session for a single test."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def temp_workspace(tmp_path):
    """Directory used as the parent of scratch workspaces."""
    workspace = tmp_path / "scratch"
    workspace.mkdir()
    return workspace


@pytest.fixture
def encryption_service():
    return KeyEncryptionService(master_key=Fernet.generate_key().decode())


@pytest.fixture
def session_store():
    return InMemorySessionStore(ttl_seconds=0)


@pytest.fixture
def mock_llm_provider():
    """LLM adapter double; no network calls."""
    provider = MagicMock(spec=LLMProvider)
    provider.complete = AsyncMock(return_value="Here is your answer.")
    provider.generate_image = AsyncMock(return_value="https://images.example.com/generated.png")
    return provider


@pytest.fixture
def mock_docker_container():
    """Container that exits 0 after printing '1'."""
    container = MagicMock()
    container.id = "container-123"
    container.wait.return_value = {"StatusCode": 0}

    def logs(stdout=True, stderr=True):
        return b"1\n" if stdout else b""

    container.logs.side_effect = logs
    return container


@pytest.fixture
def mock_docker_client(mock_docker_container):
    client = MagicMock()
    client.containers.run.return_value = mock_docker_container
    return client


@pytest.fixture
def sandbox_runner(mock_docker_client, temp_workspace):
    return SandboxRunner(
        client_factory=lambda: mock_docker_client,
        timeout=20,
        scratch_root=str(temp_workspace),
    )


@pytest.fixture
def full_app(db_session, session_store, encryption_service, mock_llm_provider, sandbox_runner):
    """The complete application with external services replaced."""
    from vipudev.main import create_app

    app = create_app()

    async def get_test_db():
        yield db_session

    app.dependency_overrides[get_db] = get_test_db
    app.dependency_overrides[get_session_store] = lambda: session_store
    app.dependency_overrides[get_credential_verifier] = lambda: StaticCredentialVerifier(
        "admin", "admin123"
    )
    app.dependency_overrides[get_encryption_service] = lambda: encryption_service
    app.dependency_overrides[get_llm_provider] = lambda: mock_llm_provider
    app.dependency_overrides[get_sandbox_runner] = lambda: sandbox_runner

    return app


@pytest.fixture
async def auth_token(session_store):
    return await session_store.issue()


@pytest.fixture
async def client(full_app, auth_token):
    """Authenticated client against the complete application."""
    transport = ASGITransport(app=full_app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"Authorization": f"Bearer {auth_token}"},
    ) as ac:
        yield ac


@pytest.fixture
async def anon_client(full_app):
    """Client without a bearer token."""
    transport = ASGITransport(app=full_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def sample_project(db_session):
    project = Project(
        name="Sample Project",
        description="A sample project for testing",
        files=[
            {"path": "main.js", "content": "console.log('hi')", "language": "javascript"},
            {"path": "lib/util.js", "content": "module.exports = {}", "language": "javascript"},
        ],
    )
    db_session.add(project)
    await db_session.commit()
    await db_session.refresh(project)
    return project


@pytest.fixture
async def sample_chat_messages(db_session):
    messages = []
    base = datetime.utcnow() - timedelta(minutes=5)
    for offset, (role, content) in enumerate([
        (MessageRole.USER, "How do I read a file in Python?"),
        (MessageRole.ASSISTANT, "Use open() inside a with block."),
        (MessageRole.USER, "And in Node?"),
    ]):
        message = ChatMessage(
            role=role, content=content, created_at=base + timedelta(seconds=offset)
        )
        db_session.add(message)
        await db_session.commit()
        await db_session.refresh(message)
        messages.append(message)
    return messages
