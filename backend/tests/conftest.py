"""
Payments API — Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── app_settings: Fresh Settings instance (env overrides applied)
    ├── app: FastAPI app built from app_settings
    └── test_client: HTTPX AsyncClient talking to the app in-process
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("MISSING_FILTER_PLACEHOLDER", None)
os.environ.pop("USER_ROUTER", None)
os.environ.pop("ENABLE_DOCS", None)

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from paymentsapi.config import Settings


@pytest.fixture
def app_settings():
    """A Settings instance that ignores any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def app(app_settings):
    from paymentsapi.main import create_app
    return create_app(app_settings)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_root(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
