"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB
    - db_manager patched so the readiness probe sees the test engine
"""

from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from task_api.db.session import create_session_factory, create_tables
from task_api.infrastructure.database import get_db, DatabaseSessionManager
from task_api.models.task import Task
import task_api.infrastructure.database as db_module
from task_api.main import app


@pytest.fixture
async def test_engine():
    engine = await create_tables("sqlite+aiosqlite:///:memory:")
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return create_session_factory(test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def make_task(test_db):
    """Insert a task directly, with optional explicit created_at."""
    async def _make(
        title: str = "Seeded task",
        description: str | None = "Seeded description",
        completed: bool = False,
        created_at: datetime | None = None,
    ) -> Task:
        stamp = created_at or datetime.now(timezone.utc)
        task = Task(
            title=title, description=description, completed=completed,
            created_at=stamp, updated_at=stamp,
        )
        test_db.add(task)
        await test_db.commit()
        await test_db.refresh(task)
        return task

    return _make
