"""
Pytest configuration for dockerized-service tests.

Puts the src directory on the Python path, sets the credentials the
tests authenticate with, and provides an async client over the app.
"""
import sys
import os
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Must be set before dockerized_service.main builds its module-level app
os.environ["USERNAME"] = "testuser"
os.environ["PASSWORD"] = "testpass"
os.environ["SECRET_MESSAGE"] = "Test secret message"

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dockerized_service.core.config import Settings  # noqa: E402
from dockerized_service.application import create_app  # noqa: E402


@pytest.fixture
def settings():
    """Settings matching the credentials used throughout the tests"""
    return Settings(
        port=0,
        username="testuser",
        password="testpass",
        secret_message="Test secret message",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest_asyncio.fixture
async def async_client(app):
    """httpx client talking to the app in-process"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
