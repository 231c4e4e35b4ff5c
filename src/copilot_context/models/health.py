"""Health check response model."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for the health check endpoint.

    Attributes:
        status: Health status indicator ("ok" or "error").
        version: The version of copilot-context.
        entry_point_count: Number of registered entry points.
        context_node_count: Number of live context fragments.
    """

    status: str = Field(..., description="Health status of the service")
    version: str = Field(..., description="Version of copilot-context")
    entry_point_count: int = Field(
        default=0,
        description="Number of registered entry points",
    )
    context_node_count: int = Field(
        default=0,
        description="Number of live context fragments",
    )
