"""Pytest configuration and shared fixtures for copilot-context tests.

This module provides common fixtures used across all test modules,
including test app creation and async client setup.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from copilot_context import CopilotContext, create_app
from copilot_context.config import CopilotContextSettings


@pytest.fixture
def test_settings():
    """Create test settings.

    Returns:
        CopilotContextSettings: Settings instance configured for testing.
    """
    return CopilotContextSettings(
        host="127.0.0.1",
        port=8000,
        log_level="DEBUG",
        cors_origins=["*"],
        context_indent=3,
    )


@pytest.fixture
def copilot():
    """Create an empty CopilotContext shared by the test app and the test."""
    return CopilotContext()


@pytest.fixture
def test_app(test_settings, copilot):
    """Create a FastAPI test application instance.

    Args:
        test_settings: Test settings fixture.
        copilot: CopilotContext fixture the app exposes.

    Returns:
        FastAPI: Configured test application.
    """
    return create_app(settings=test_settings, copilot=copilot)


@pytest_asyncio.fixture
async def async_client(test_app):
    """Create an async HTTP client for testing FastAPI endpoints.

    Args:
        test_app: Test application fixture.

    Yields:
        AsyncClient: Async HTTP client for making test requests.
    """
    # Trigger the lifespan startup manually for tests
    async with test_app.router.lifespan_context(test_app):
        transport = ASGITransport(app=test_app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
