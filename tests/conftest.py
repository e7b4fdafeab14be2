from __future__ import annotations

import sys
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from ganado.config.settings import Settings
from ganado.infrastructure.db.session import SQLAlchemyUnitOfWork, create_schema
from ganado.interfaces.http.main import create_app


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "log_level": "INFO",
            "environment": "test",
        }
    )


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        await create_schema(engine, drop_existing=True)
        yield client
    await app.state.engine.dispose()


@pytest.fixture()
def seed(app, client):
    """Store domain objects directly through the repositories."""

    async def _seed(*, animals=(), reproductions=()) -> None:
        uow = SQLAlchemyUnitOfWork(app.state.session_factory)
        async with uow:
            for reproduction in reproductions:
                await uow.reproductions.add(reproduction)
            for animal in animals:
                await uow.animals.add(animal)
            await uow.commit()

    return _seed
