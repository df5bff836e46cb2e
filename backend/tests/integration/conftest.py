"""Fixtures for HTTP-level tests against a temporary SQLite store."""

from pathlib import Path

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from user_registry.config import Settings
from user_registry.main import create_app


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'users.db'}",
        app_env="test",
    )


@pytest_asyncio.fixture
async def app(settings: Settings):
    """Application with its lifespan (connect + schema bootstrap) running."""
    application = create_app(settings)
    async with application.router.lifespan_context(application):
        yield application


@pytest_asyncio.fixture
async def client(app: FastAPI):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
