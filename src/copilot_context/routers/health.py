"""Health check endpoint router."""

from typing import Annotated

from fastapi import APIRouter, Depends

from copilot_context import __version__
from copilot_context.copilot import CopilotContext
from copilot_context.dependencies import get_copilot
from copilot_context.models.health import HealthResponse

router = APIRouter(prefix="/api/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    copilot: Annotated[CopilotContext, Depends(get_copilot)],
) -> HealthResponse:
    """Health check endpoint.

    Returns the current health status and version of copilot-context along
    with the number of registered entry points and context fragments.

    Args:
        copilot: Injected CopilotContext

    Returns:
        HealthResponse: Health status and version information.
    """
    return HealthResponse(
        status="ok",
        version=__version__,
        entry_point_count=len(copilot.entry_points),
        context_node_count=len(copilot.tree),
    )
