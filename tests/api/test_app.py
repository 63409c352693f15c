"""Application Factory — prefix mounting, lifespan, catch-all errors."""

from httpx import ASGITransport, AsyncClient

import task_api.infrastructure.database as db_module
from task_api.config import Settings
from task_api.infrastructure.database import DatabaseSessionManager, get_db
from task_api.main import create_app, lifespan


def _settings(**overrides) -> Settings:
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:", log_format="text", **overrides,
    )


async def test_routes_mount_under_api_prefix(test_session_factory):
    app = create_app(_settings(api_prefix="api/"))

    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        assert (await c.get("/api/health")).status_code == 200
        assert (await c.get("/api/tasks")).status_code == 200
        assert (await c.get("/tasks")).status_code == 404


async def test_lifespan_initializes_database_and_tables(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    app = create_app(_settings())

    async with lifespan(app):
        assert db_module.db_manager is not None
        assert await db_module.db_manager.health_check() is True
        async with db_module.db_manager.session() as db:
            from sqlalchemy import text
            result = await db.execute(text("SELECT COUNT(*) FROM tasks"))
            assert result.scalar_one() == 0


async def test_unhandled_exception_returns_500_envelope():
    app = create_app(_settings())

    async def broken_db():
        raise RuntimeError("secret internal detail")
        yield  # pragma: no cover

    app.dependency_overrides[get_db] = broken_db
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get("/tasks")

    assert res.status_code == 500
    body = res.json()
    assert body["success"] is False
    assert body["error"]["code"] == "INTERNAL_ERROR"
    assert "secret" not in res.text


async def test_database_failure_returns_503_envelope(monkeypatch):
    # real session manager, but the schema was never created
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    monkeypatch.setattr(db_module, "db_manager", manager)
    app = create_app(_settings())

    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as c:
            res = await c.get("/tasks")
    finally:
        await manager.close()

    assert res.status_code == 503
    body = res.json()
    assert body["success"] is False
    assert body["error"]["code"] == "DATABASE_ERROR"
    assert "no such table" not in res.text
