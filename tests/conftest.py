"""Shared test fixtures for the FastAPI test client and captured logs."""

from collections.abc import AsyncGenerator, Iterator
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine
from structlog.testing import capture_logs

from webhook_receiver.dependencies import get_db_engine
from webhook_receiver.main import app


@pytest.fixture(autouse=True)
def captured_logs() -> Iterator[list[dict]]:
    """Capture structlog events so they neither reach stdout nor get lost."""
    with capture_logs() as logs:
        yield logs


@pytest.fixture
def mock_db_engine() -> AsyncMock:
    """Create a mock async engine standing in for the SQLite pool."""
    return AsyncMock(spec=AsyncEngine)


@pytest.fixture
async def client(mock_db_engine: AsyncMock) -> AsyncGenerator[AsyncClient, None]:
    """Yield an httpx AsyncClient with the database pool overridden.

    The lifespan does not run under ASGITransport, so the pool dependency is
    replaced with a mock; handlers must never query it.
    """
    app.dependency_overrides[get_db_engine] = lambda: mock_db_engine
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
