"""Dependency injection providers for FastAPI endpoints."""

from functools import lru_cache

from fastapi import HTTPException, Request

from copilot_context.config import CopilotContextSettings
from copilot_context.copilot import CopilotContext


@lru_cache
def get_settings() -> CopilotContextSettings:
    """Get the application settings instance.

    This function is cached so that the same settings instance is reused
    across all requests. Settings are loaded from environment variables
    with the COPILOT_ prefix.

    Returns:
        CopilotContextSettings: The application configuration settings.
    """
    return CopilotContextSettings()


def get_copilot(request: Request) -> CopilotContext:
    """Get the CopilotContext from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        CopilotContext: The facade shared by all requests.

    Raises:
        HTTPException: If no CopilotContext is attached to the app (503 Service Unavailable).
    """
    if not hasattr(request.app.state, "copilot"):
        raise HTTPException(
            status_code=503,
            detail="Copilot context not initialized",
        )
    return request.app.state.copilot
