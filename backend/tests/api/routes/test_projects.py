"""Tests for Projects API routes."""

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport
from sqlalchemy import select

from vipudev.api.routes.projects import router
from vipudev.models.database import Project


@pytest.fixture
def app(db_session):
    """Create FastAPI app with projects router."""
    app = FastAPI()
    app.include_router(router, prefix="/api")

    async def get_test_db():
        yield db_session

    from vipudev.core.storage.database import get_db

    app.dependency_overrides[get_db] = get_test_db

    return app


@pytest.mark.api
class TestProjectsAPI:
    """Test cases for Projects API."""

    @pytest.mark.asyncio
    async def test_list_projects_empty(self, app, db_session):
        """Test listing projects when empty."""
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/projects")

        assert response.status_code == 200
        assert response.json() == {"projects": []}

    @pytest.mark.asyncio
    async def test_list_projects_most_recently_updated_first(self, app, db_session):
        """Test that the list is ordered by last update."""
        older = Project(name="Older")
        db_session.add(older)
        await db_session.commit()
        newer = Project(name="Newer")
        db_session.add(newer)
        await db_session.commit()

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            await client.patch(f"/api/projects/{older.id}", json={"description": "touched"})
            response = await client.get("/api/projects")

        names = [p["name"] for p in response.json()["projects"]]
        assert names == ["Older", "Newer"]

    @pytest.mark.asyncio
    async def test_create_project(self, app, db_session):
        """Test creating a new project."""
        files = [
            {"path": "main.js", "content": "// Start coding here...\n", "language": "javascript"},
            {"path": "src/app.py", "content": "print('hi')", "language": "python"},
        ]
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.post(
                "/api/projects",
                json={"name": "New Project", "description": "Test description", "files": files},
            )

        assert response.status_code == 201
        project = response.json()["project"]
        assert project["name"] == "New Project"
        assert project["description"] == "Test description"
        assert project["files"] == files
        assert "id" in project
        assert "createdAt" in project
        assert "updatedAt" in project

    @pytest.mark.asyncio
    async def test_create_project_defaults_to_no_files(self, app, db_session):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.post("/api/projects", json={"name": "Empty"})

        assert response.status_code == 201
        assert response.json()["project"]["files"] == []
        assert response.json()["project"]["description"] is None

    @pytest.mark.asyncio
    async def test_get_project(self, app, db_session, sample_project):
        """Test getting a project by ID."""
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get(f"/api/projects/{sample_project.id}")

        assert response.status_code == 200
        project = response.json()["project"]
        assert project["id"] == sample_project.id
        assert project["name"] == sample_project.name
        assert [f["path"] for f in project["files"]] == ["main.js", "lib/util.js"]

    @pytest.mark.asyncio
    async def test_get_project_not_found(self, app, db_session):
        """Test getting a non-existent project."""
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/projects/nonexistent-id")

        assert response.status_code == 404
        assert response.json()["detail"] == "Project not found"

    @pytest.mark.asyncio
    async def test_update_project_replaces_files(self, app, db_session, sample_project):
        """Test that saving replaces the whole files array."""
        new_files = [{"path": "index.js", "content": "1 + 1", "language": "javascript"}]
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.patch(
                f"/api/projects/{sample_project.id}", json={"files": new_files}
            )

        assert response.status_code == 200
        project = response.json()["project"]
        assert project["files"] == new_files
        assert project["name"] == "Sample Project"

    @pytest.mark.asyncio
    async def test_update_project_partial(self, app, db_session, sample_project):
        """Test partial project update."""
        original_description = sample_project.description

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.patch(
                f"/api/projects/{sample_project.id}", json={"name": "Only Name Updated"}
            )

        assert response.status_code == 200
        project = response.json()["project"]
        assert project["name"] == "Only Name Updated"
        assert project["description"] == original_description
        assert len(project["files"]) == 2

    @pytest.mark.asyncio
    async def test_update_project_null_name_rejected(self, app, db_session, sample_project):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.patch(
                f"/api/projects/{sample_project.id}", json={"name": None}
            )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_project_not_found(self, app, db_session):
        """Test updating a non-existent project."""
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.patch("/api/projects/nonexistent-id", json={"name": "New Name"})

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_project(self, app, db_session, sample_project):
        """Test deleting a project."""
        project_id = sample_project.id

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.delete(f"/api/projects/{project_id}")

        assert response.status_code == 200
        assert response.json() == {"success": True}

        result = await db_session.execute(select(Project).where(Project.id == project_id))
        assert result.scalar_one_or_none() is None

    @pytest.mark.asyncio
    async def test_delete_project_not_found(self, app, db_session):
        """Test deleting a non-existent project returns 404, not 500."""
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.delete("/api/projects/nonexistent-id")

        assert response.status_code == 404
