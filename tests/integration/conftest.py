"""
Fixtures for integration tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.database import get_read_gateway, get_write_gateway


@pytest.fixture
async def client(fake_gateway):
    """
    HTTP client for testing API endpoints.

    Overrides both gateway dependencies with the in-memory fake.
    """
    app.dependency_overrides[get_read_gateway] = lambda: fake_gateway
    app.dependency_overrides[get_write_gateway] = lambda: fake_gateway

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
