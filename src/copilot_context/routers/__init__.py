"""FastAPI routers for API endpoints.

Each router module defines endpoints for a specific resource (health,
functions, context).
"""

from copilot_context.routers import context, functions, health

__all__ = [
    "context",
    "functions",
    "health",
]
